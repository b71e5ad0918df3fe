"""Fantasy name generation for players and bots."""

import time
from typing import Callable, Optional

from ...core.random_source import RandomSource, default_random

MAX_NAME_LENGTH = 10
MIN_SUFFIX_LENGTH = 2
MAX_SUFFIX_LENGTH = 3

_PREFIXES = (
    "Ar", "Bel", "Cor", "Dra", "El", "Fen", "Gal", "Hal", "Is", "Jor", "Kal", "Lor", "Mor",
    "Nor", "Or", "Pel", "Quin", "Ral", "Syl", "Tor", "Ul", "Val", "Wyn", "Xan", "Yor", "Zar",
)
_MIDDLES = ("a", "e", "i", "o", "u", "an", "el", "or", "is", "ar")
_ENDINGS = ("dor", "ric", "wen", "mir", "thos", "lin", "ra", "vyn", "gar", "nox", "ria", "mund")

_LETTERS = "abcdefghijklmnopqrstuvwxyz"


def _pick(options: tuple[str, ...], rng: RandomSource) -> str:
    return options[min(int(rng() * len(options)), len(options) - 1)]


def _letters_for(number: int, length: int) -> str:
    letters = []
    for _ in range(length):
        number, index = divmod(number, len(_LETTERS))
        letters.append(_LETTERS[index])
    return "".join(reversed(letters))


def _base_name(rng: RandomSource) -> str:
    name = _pick(_PREFIXES, rng)
    if rng() < 0.5:
        name += _pick(_MIDDLES, rng)
    name += _pick(_ENDINGS, rng)
    return name[:MAX_NAME_LENGTH]


def _with_suffix(name: str, rng: RandomSource, registry: set[str], stamp: int) -> str:
    trimmed = name[:MAX_NAME_LENGTH - MIN_SUFFIX_LENGTH]
    offset = int(rng() * 1000) + stamp

    for length in range(MIN_SUFFIX_LENGTH, MAX_SUFFIX_LENGTH + 1):
        if len(trimmed) + length > MAX_NAME_LENGTH:
            break
        space = len(_LETTERS) ** length
        for attempt in range(space):
            candidate = trimmed + _letters_for((offset + attempt) % space, length)
            if candidate not in registry:
                return candidate

    raise ValueError(f"No free name left for base '{name}'")


def generate_character_name(
    rng: Optional[RandomSource] = None,
    registry: Optional[set[str]] = None,
    now: Optional[Callable[[], float]] = None,
) -> str:
    """Generate a single alphabetic word of at most 10 characters.

    Args:
        rng: Random source for syllables and suffixes
        registry: Names already taken. When given, a colliding name gets a
            2 or 3 letter suffix, and the returned name is added to it.
        now: Clock in seconds mixed into suffixes; ``time.time`` when omitted

    Returns:
        The generated name
    """
    rng = rng or default_random()
    name = _base_name(rng)

    if registry is None:
        return name

    if name in registry:
        stamp = int((now or time.time)())
        name = _with_suffix(name, rng, registry, stamp)

    registry.add(name)
    return name
