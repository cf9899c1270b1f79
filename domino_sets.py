"""
Domino set generation and utilities.
"""
import logging
from typing import Iterator, List

from domino_tokens import DominoToken, Variant
from token_values import generate_token_values

logger = logging.getLogger(__name__)


def generate_tokens(max_face_value: int, variant: Variant = Variant.STANDARD) -> List[DominoToken]:
    """
    Generate every token of a double-N set for the given variant.

    Tokens come out ordered by left face, then right face:
    N=2 gives (0|0), (0|1), (0|2), (1|1), (1|2), (2|2).
    A negative max_face_value gives an empty list.
    """
    tokens = [DominoToken(a, b, variant) for a, b in generate_token_values(max_face_value)]
    logger.debug("Generated %d %s tokens for max face value %d",
                 len(tokens), variant.value, max_face_value)
    return tokens


class TokenSet:
    """An ordered collection of domino tokens."""

    def __init__(self, tokens: List[DominoToken] = None):
        self.tokens = list(tokens) if tokens else []

    @classmethod
    def generate(cls, max_face_value: int, variant: Variant = Variant.STANDARD) -> 'TokenSet':
        return cls(generate_tokens(max_face_value, variant))

    @classmethod
    def double_six(cls, variant: Variant = Variant.STANDARD) -> 'TokenSet':
        """Create a standard double-six set (28 tokens, 0-6)."""
        return cls.generate(6, variant)

    @classmethod
    def double_nine(cls, variant: Variant = Variant.STANDARD) -> 'TokenSet':
        """Create a double-nine set (55 tokens, 0-9)."""
        return cls.generate(9, variant)

    @classmethod
    def double_twelve(cls, variant: Variant = Variant.STANDARD) -> 'TokenSet':
        """Create a double-twelve set (91 tokens, 0-12)."""
        return cls.generate(12, variant)

    def doubles(self) -> List[DominoToken]:
        """Return the tokens whose faces match."""
        return [t for t in self.tokens if t.is_double()]

    def total_value(self) -> int:
        """Sum of token values, each under its own variant."""
        return sum(t.value() for t in self.tokens)

    def __len__(self):
        return len(self.tokens)

    def __iter__(self) -> Iterator[DominoToken]:
        return iter(self.tokens)

    def __getitem__(self, index: int) -> DominoToken:
        return self.tokens[index]

    def __repr__(self):
        return f"TokenSet({len(self.tokens)} tokens)"

    def display(self, per_row: int = 7):
        """Pretty print the token set."""
        for i, t in enumerate(self.tokens):
            print(f"{t}", end="  ")
            if (i + 1) % per_row == 0:
                print()
        print()
