"""
Pair enumeration for domino sets.
"""
from typing import List, Optional, Tuple


def generate_token_values(
    max_value: int,
    values: Optional[List[Tuple[int, int]]] = None
) -> List[Tuple[int, int]]:
    """
    Append every unordered face pair (a, b) with 0 <= a <= b <= max_value.

    Pairs are ordered by ascending left face, then ascending right face.
    A negative max_value appends nothing.

    Args:
        max_value: Highest face value in the set (6 for double-six, etc.)
        values: Collection to populate; a new list is created when omitted

    Returns:
        The populated list
    """
    if values is None:
        values = []

    for a in range(max_value + 1):
        for b in range(a, max_value + 1):
            values.append((a, b))

    return values


def token_count(max_value: int) -> int:
    """Number of tokens in a double-N set."""
    if max_value < 0:
        return 0
    return (max_value + 1) * (max_value + 2) // 2
