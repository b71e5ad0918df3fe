#!/usr/bin/env python3

import argparse

from pixelarena.core.data import CombatWinner
from pixelarena.core.events import EventManager
from pixelarena.core.random_source import mulberry32, seed_from_text
from pixelarena.game.balance import BalanceSimulator
from pixelarena.game.characters import generate_initial_stats
from pixelarena.game.combat import compute_combat_stats, get_combat_balance_label, simulate_combat
from pixelarena.game.managers import LogManager


def print_fighter(character):
    stats = compute_combat_stats(character)
    print(
        f"{character.name:<10} L{character.level}  HP {character.max_hp:>3}  "
        f"OFF {stats.offense:5.1f}  DEF {stats.defense:5.1f}  SPD {stats.speed:5.1f}  "
        f"POW {stats.total_power:6.1f}  {get_combat_balance_label(stats)}"
    )


def run_fight(args):
    event_manager = EventManager()
    log_manager = LogManager(event_manager, log_dir=args.log_dir)

    player = generate_initial_stats(args.player, rng=mulberry32(seed_from_text(args.player)))
    opponent = generate_initial_stats(args.opponent, rng=mulberry32(seed_from_text(args.opponent)))
    print_fighter(player)
    print_fighter(opponent)
    print()

    result = simulate_combat(player, opponent, mulberry32(args.seed), event_manager=event_manager)
    event_manager.process_events()

    for detail, snapshot in zip(result.details, result.timeline):
        print(f"{detail:<45} {snapshot.attacker_hp:>4} | {snapshot.defender_hp:<4}")

    if result.winner == CombatWinner.DRAW:
        print(f"\nDraw after {result.rounds} rounds")
    else:
        print(f"\n{result.winner.value} wins after {result.rounds} rounds")

    if args.save_log:
        path = log_manager.save_log_to_file()
        if path:
            print(f"Log saved to {path}")


def run_balance(args):
    player = generate_initial_stats(args.player, rng=mulberry32(seed_from_text(args.player)))
    opponent = generate_initial_stats(args.opponent, rng=mulberry32(seed_from_text(args.opponent)))

    report = BalanceSimulator().run_matchup(player, opponent, fights=args.fights, seed=args.seed)

    print(f"{player.name} vs {opponent.name} over {report.fights} fights")
    print(f"  {player.name} wins:   {report.attacker_win_rate:6.1%}")
    print(f"  {opponent.name} wins: {report.defender_win_rate:6.1%}")
    print(f"  draws:       {report.draw_rate:6.1%}")
    print(f"  rounds:      {report.mean_rounds:.1f} +/- {report.std_rounds:.1f}")


def main():
    parser = argparse.ArgumentParser(description="Pixel Arena combat simulator")
    parser.add_argument("--player", default="HERO", help="Player name (also seeds its stats)")
    parser.add_argument("--opponent", default="RIVAL", help="Opponent name (also seeds its stats)")
    parser.add_argument("--seed", type=int, default=1, help="Seed of the fight")
    parser.add_argument("--balance", action="store_true", help="Run a batch of fights instead of one")
    parser.add_argument("--fights", type=int, default=1000, help="Batch size for --balance")
    parser.add_argument("--save-log", action="store_true", help="Write the engine log to --log-dir")
    parser.add_argument("--log-dir", default="logs")

    args = parser.parse_args()

    if args.balance:
        run_balance(args)
    else:
        run_fight(args)


if __name__ == "__main__":
    main()
