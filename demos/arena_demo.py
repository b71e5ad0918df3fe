#!/usr/bin/env python3

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from pixelarena.core.events import EventManager
from pixelarena.core.random_source import mulberry32
from pixelarena.game.characters import generate_character_name, generate_initial_stats
from pixelarena.game.managers import FightManager, LogManager
from pixelarena.game.matchmaking import find_opponent, get_match_difficulty_label
from pixelarena.game.progression import format_xp_display


def main():
    print("Pixel Arena - Demo Mode")
    print("One player spends a day of fights against a pool of seeded bots")
    print("")

    rng = mulberry32(2024)
    registry = set()
    event_manager = EventManager()
    log_manager = LogManager(event_manager)
    manager = FightManager(event_manager=event_manager)

    player = generate_initial_stats(generate_character_name(rng, registry), rng=rng).evolve(character_id="player")
    bots = [
        generate_initial_stats(generate_character_name(rng, registry), rng=rng).evolve(character_id=f"bot{i}")
        for i in range(8)
    ]

    while player.fights_left > 0:
        match = find_opponent(player, bots, rng)
        if match is None:
            print("No opponent at this level, the day ends early")
            break

        outcome = manager.resolve_fight(player, match.opponent, rng)
        player = outcome.updated_character
        result = "won" if outcome.won else "lost"
        print(
            f"{get_match_difficulty_label(match.match_type):<10} vs {outcome.opponent_name:<10} "
            f"{result} in {outcome.combat.rounds:>2} rounds  +{outcome.xp_gained} XP"
        )

        if outcome.won:
            player, item = manager.open_lootbox(player, rng)
            if item is not None:
                print(f"{'':<10}    found {item.name} ({item.rarity.value})")

    event_manager.process_events()

    print("")
    print(f"{player.name}: level {player.level}, {format_xp_display(player.level, player.experience)}")
    print(f"Record: {player.wins}W / {player.losses}L, {player.stat_points} stat points to spend")
    print("")
    print("Engine log:")
    for entry in log_manager.get_messages(count=10):
        print(f"  {entry.format()}")


if __name__ == "__main__":
    main()
