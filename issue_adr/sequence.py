"""Next ADR number from the files already in a status folder.

The number is re-derived from the listing on every run; two concurrent runs
against the same folder can pick the same number.
"""

import re
from pathlib import Path

SEQUENCE_PREFIX = re.compile(r"^([0-9]{4})-")
FIRST_SEQUENCE = 1


def format_sequence(number: int) -> str:
    """Zero-padded 4-digit form, e.g. 7 -> '0007'."""
    return f"{number:04d}"


def existing_sequence_numbers(folder: Path) -> list[int]:
    """Numbers of entries named NNNN-*; other entries are ignored."""
    numbers = []
    for entry in folder.iterdir():
        match = SEQUENCE_PREFIX.match(entry.name)
        if match:
            numbers.append(int(match.group(1)))
    return numbers


def next_sequence_number(folder: Path) -> str:
    """Return the next free number in ``folder``.

    Creates the folder (with parents) and returns '0001' when it does not
    exist. Also '0001' when no entry carries a NNNN- prefix, regardless of
    how many other entries there are.
    """
    folder = Path(folder)
    if not folder.exists():
        folder.mkdir(parents=True, exist_ok=True)
        return format_sequence(FIRST_SEQUENCE)
    numbers = existing_sequence_numbers(folder)
    next_number = max(numbers) + 1 if numbers else FIRST_SEQUENCE
    return format_sequence(next_number)
