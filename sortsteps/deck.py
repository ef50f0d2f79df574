"""Playing cards and sorting of a deck by suit and value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import MutableSequence

_VALUES = ("Ace", "2", "3", "4", "5", "6", "7", "8", "9", "10", "Jack", "Queen", "King")


class Kind(IntEnum):
    """Card suit, in sorting order."""

    SPADE = 0
    HEART = 1
    CLUB = 2
    DIAMOND = 3


@dataclass(frozen=True)
class Card:
    """A playing card with a value from "Ace" to "King" and a suit."""

    value: str
    kind: Kind


def card_value(value: str) -> int:
    """Return the rank of a card value, from 0 for "Ace" to 12 for "King"."""
    try:
        return _VALUES.index(value)
    except ValueError:
        raise ValueError(f"unknown card value: {value!r}") from None


def compare_cards(first: Card, second: Card) -> int:
    """Return a negative, zero or positive number as ``first`` sorts before, with or after ``second``."""
    if first.kind != second.kind:
        return int(first.kind) - int(second.kind)
    return card_value(first.value) - card_value(second.value)


def _sort_key(card: Card) -> tuple[int, int]:
    return int(card.kind), card_value(card.value)


def sort_deck(deck: MutableSequence[Card]) -> None:
    """Sort the deck in place by suit, then by value."""
    deck[:] = sorted(deck, key=_sort_key)