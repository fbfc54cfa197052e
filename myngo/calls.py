import random
from typing import Collection, List, Optional

from .cards import COLUMNS, RANGES

ALL_NUMBERS = range(1, 76)

# No I, O, 0, 1
ROOM_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ROOM_CODE_LENGTH = 6


class NumbersExhaustedError(ValueError):
    pass


def letter_for_number(number: int) -> str:
    for letter, (low, high) in zip(COLUMNS, RANGES):
        if low <= number <= high:
            return letter
    raise ValueError(f"Invalid MYNGO number: {number}")


def format_call(number: int) -> str:
    return f"{letter_for_number(number)}-{number}"


def available_numbers(called: Collection[int]) -> List[int]:
    called_set = set(called)
    return [n for n in ALL_NUMBERS if n not in called_set]


def draw_next_number(called: Collection[int], rng: Optional[random.Random] = None) -> int:
    """Pick the next number uniformly from the ones not yet called."""
    remaining = available_numbers(called)
    if not remaining:
        raise NumbersExhaustedError("all 75 numbers have been called")
    return (rng or random.Random()).choice(remaining)


def generate_room_code(rng: Optional[random.Random] = None, length: int = ROOM_CODE_LENGTH) -> str:
    rng = rng or random.Random()
    return "".join(rng.choice(ROOM_CODE_ALPHABET) for _ in range(length))
