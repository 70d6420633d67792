"""Character classification and string reversal."""

from __future__ import annotations

from enum import Enum


class CharacterClass(Enum):
    """The kinds of character that ``classify_character`` tells apart."""

    DIGIT = "digit"
    LOWERCASE = "Alphabet small case"
    UPPERCASE = "Alphabet capital case"
    SPECIAL = "Special Character"


def classify_character(ch: str) -> CharacterClass:
    """Classify a single character as an ASCII digit, letter, or anything else."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if "0" <= ch <= "9":
        return CharacterClass.DIGIT
    if "a" <= ch <= "z":
        return CharacterClass.LOWERCASE
    if "A" <= ch <= "Z":
        return CharacterClass.UPPERCASE
    return CharacterClass.SPECIAL


def reverse_string(text: str) -> str:
    """Return a line of text reversed, leaving out its trailing newline."""
    if not text or text[0] == "\n":
        raise ValueError("nothing to reverse")
    return text.removesuffix("\n")[::-1]