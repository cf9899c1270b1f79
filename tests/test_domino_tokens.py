"""Unit tests for domino tokens and value scoring."""

import dataclasses

import pytest

from domino_tokens import (
    BlankTokenError,
    DominoToken,
    Variant,
    token_value,
)


class TestDominoToken:
    """Tests for token identity and display."""

    def test_faces_are_kept_as_given(self):
        token = DominoToken(6, 2)
        assert token.faces() == (6, 2)
        assert token.left == 6
        assert token.right == 2

    def test_default_variant_is_standard(self):
        assert DominoToken(1, 2).variant == Variant.STANDARD

    def test_is_double(self):
        assert DominoToken(4, 4).is_double()
        assert not DominoToken(4, 5).is_double()

    def test_token_is_immutable(self):
        token = DominoToken(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.left = 3

    def test_display_faces(self, variant):
        assert DominoToken(2, 3, variant).display() == "(2 | 3)"
        assert str(DominoToken(2, 3, variant)) == "(2 | 3)"

    def test_negative_faces_are_accepted(self):
        token = DominoToken(-2, 5)
        assert token.display() == "(-2 | 5)"
        assert token.value() == 3

    def test_equality_includes_variant(self):
        assert DominoToken(1, 2, Variant.DOUBLED) == DominoToken(1, 2, Variant.DOUBLED)
        assert DominoToken(1, 2, Variant.DOUBLED) != DominoToken(1, 2)
        assert DominoToken(1, 2) != DominoToken(2, 1)
        assert len({DominoToken(1, 2), DominoToken(1, 2)}) == 1


class TestBlankToken:
    """Tests for tokens constructed without faces."""

    @pytest.mark.parametrize("variant,label", [
        (Variant.STANDARD, "Domino Token"),
        (Variant.SIX_UNVALUABLE, "Six Unvaluable Domino Token"),
        (Variant.DOUBLED, "Doubled Value Domino Token"),
    ])
    def test_placeholder_display(self, variant, label):
        assert DominoToken.blank(variant).display() == label
        assert DominoToken(variant=variant).display() == label

    def test_default_construction_is_blank(self):
        token = DominoToken()
        assert token.is_blank
        assert token.faces() == (None, None)
        assert not DominoToken(0, 0).is_blank

    def test_value_on_blank_raises(self, variant):
        with pytest.raises(BlankTokenError):
            DominoToken.blank(variant).value()

    def test_is_double_on_blank_raises(self):
        with pytest.raises(BlankTokenError):
            DominoToken.blank().is_double()

    def test_half_blank_token_is_blank(self):
        token = DominoToken(3, None)
        assert token.is_blank
        assert token.display() == "Domino Token"


class TestTokenValue:
    """Tests for per-variant value computation."""

    def test_standard(self):
        assert DominoToken(3, 5).value() == 8
        assert token_value(DominoToken(0, 0)) == 0

    @pytest.mark.parametrize("faces,expected", [
        ((6, 6), 0),
        ((6, 2), 2),
        ((2, 6), 2),
        ((6, 0), 0),
        ((3, 4), 7),
        ((5, 7), 12),
    ])
    def test_six_unvaluable(self, faces, expected):
        assert DominoToken(*faces, Variant.SIX_UNVALUABLE).value() == expected

    def test_doubled(self):
        assert DominoToken(3, 4, Variant.DOUBLED).value() == 14
        assert DominoToken(6, 6, Variant.DOUBLED).value() == 24


class TestVariant:
    """Tests for variant lookup."""

    def test_from_name(self, variant):
        assert Variant.from_name(variant.value) is variant

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown variant"):
            Variant.from_name("tripled")
