"""
Domino token definitions and value scoring.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

UNVALUABLE_FACE = 6


class BlankTokenError(ValueError):
    """Raised when a face-dependent operation is called on a blank token."""


class Variant(Enum):
    STANDARD = 'standard'              # Sum of faces
    SIX_UNVALUABLE = 'six-unvaluable'  # Faces showing six count for nothing
    DOUBLED = 'doubled'                # Twice the standard value

    @property
    def placeholder(self) -> str:
        """Label shown for a token of this variant with no faces."""
        return _PLACEHOLDERS[self]

    @classmethod
    def from_name(cls, name: str) -> 'Variant':
        """Parse a variant from its command-line name."""
        for variant in cls:
            if variant.value == name:
                return variant
        names = ", ".join(v.value for v in cls)
        raise ValueError(f"Unknown variant {name!r} (expected one of: {names})")


_PLACEHOLDERS = {
    Variant.STANDARD: "Domino Token",
    Variant.SIX_UNVALUABLE: "Six Unvaluable Domino Token",
    Variant.DOUBLED: "Doubled Value Domino Token",
}


@dataclass(frozen=True)
class DominoToken:
    """
    A domino token with two face values and a scoring variant.

    Faces are stored as given: no ordering or range checks are applied.
    A token built without faces is blank and only supports display().
    """
    left: Optional[int] = None
    right: Optional[int] = None
    variant: Variant = Variant.STANDARD

    @classmethod
    def blank(cls, variant: Variant = Variant.STANDARD) -> 'DominoToken':
        """Create a token with no faces."""
        return cls(None, None, variant)

    @property
    def is_blank(self) -> bool:
        return self.left is None or self.right is None

    def faces(self) -> Tuple[Optional[int], Optional[int]]:
        return (self.left, self.right)

    def is_double(self) -> bool:
        """Check if both faces are equal."""
        self._require_faces("is_double")
        return self.left == self.right

    def value(self) -> int:
        """Point value under this token's variant."""
        return token_value(self)

    def display(self) -> str:
        if self.is_blank:
            return self.variant.placeholder
        return f"({self.left} | {self.right})"

    def generate_set(self, max_face_value: int) -> List['DominoToken']:
        """Generate the full double-N set using this token's variant."""
        from domino_sets import generate_tokens
        return generate_tokens(max_face_value, self.variant)

    def _require_faces(self, operation: str) -> None:
        if self.is_blank:
            raise BlankTokenError(f"{operation}() called on blank {self.variant.placeholder}")

    def __str__(self):
        return self.display()


def standard_value(left: int, right: int) -> int:
    return left + right


def token_value(token: DominoToken) -> int:
    """
    Compute a token's value under its variant.

    Raises:
        BlankTokenError: if the token has no faces
    """
    token._require_faces("value")
    left, right = token.left, token.right

    if token.variant == Variant.STANDARD:
        return standard_value(left, right)

    elif token.variant == Variant.SIX_UNVALUABLE:
        value = 0
        if left != UNVALUABLE_FACE:
            value += left
        if right != UNVALUABLE_FACE:
            value += right
        return value

    elif token.variant == Variant.DOUBLED:
        return 2 * standard_value(left, right)

    raise ValueError(f"Unsupported variant: {token.variant!r}")
