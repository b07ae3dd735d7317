"""Validation helpers for values typed on the command line."""

from ..errors import InvalidIndexError, OutOfRangeError


def parse_index(value):
    """
    Turn a user-supplied index into an int.

    Args:
        value (int or str): Index as typed, e.g. "3"

    Returns:
        int: The parsed index (not yet range-checked)

    Raises:
        InvalidIndexError: If the value is not an integer
    """
    if isinstance(value, bool):
        raise InvalidIndexError(f"Invalid index: '{value}'. Index must be a positive integer.")
    if isinstance(value, int):
        return value

    text = str(value).strip() if value is not None else ""
    try:
        return int(text)
    except ValueError:
        raise InvalidIndexError(f"Invalid index: '{value}'. Index must be a positive integer.")


def check_index_range(index, total):
    """
    Make sure a 1-based index points at an existing entry.

    Raises:
        OutOfRangeError: If index < 1 or index > total
    """
    if total == 0:
        raise OutOfRangeError(f"Index {index} is out of range: no favorites saved yet.",
                              hint="Add one first with 'fav add <command>'.")
    if index < 1 or index > total:
        raise OutOfRangeError(f"Index {index} is out of range. Valid indices: 1-{total}.")
