"""
Deck model for Let It Ride evaluation.
Handles card identity, parsing, and the cards left after a known set is dealt.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .errors import InvalidCard


class Suit(Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"


RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K", "A"]
RANK_ORDER = {rank: i for i, rank in enumerate(RANKS)}
SUIT_BY_CODE = {suit.value: suit for suit in Suit}

# Ranks that make a paying pair; also exactly the royal flush ranks
HIGH_RANKS = frozenset({"T", "J", "Q", "K", "A"})


@dataclass(frozen=True)
class Card:
    rank: str
    suit: Suit

    @property
    def rank_order(self) -> int:
        """Face order, 2=0 ... A=12."""
        return RANK_ORDER[self.rank]

    @property
    def code(self) -> str:
        return f"{self.rank}{self.suit.value}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Card({self.code})"


def parse_card(code) -> Card:
    """Parse a card code like 'Ah' or 'Td'. Well-formed Cards pass through unchanged."""
    if isinstance(code, Card):
        if code.rank not in RANK_ORDER or not isinstance(code.suit, Suit):
            raise InvalidCard(f"{code.rank}{getattr(code.suit, 'value', code.suit)}")
        return code
    if not isinstance(code, str):
        raise InvalidCard(code)

    text = code.strip()
    # Accept "10h" as well as "Th"
    if text.startswith("10"):
        text = "T" + text[2:]
    if len(text) != 2:
        raise InvalidCard(code)

    rank, suit = text[0].upper(), text[1].lower()
    if rank not in RANK_ORDER or suit not in SUIT_BY_CODE:
        raise InvalidCard(code)
    return Card(rank=rank, suit=SUIT_BY_CODE[suit])


def _build_deck() -> tuple[Card, ...]:
    # Rank-major: 2c 2d 2h 2s 3c ... As
    return tuple(Card(rank=rank, suit=suit) for rank in RANKS for suit in Suit)


_DECK = _build_deck()


def all_cards() -> tuple[Card, ...]:
    """The 52 cards of a standard deck, in canonical order."""
    return _DECK


def remaining(known: Iterable[Card]) -> list[Card]:
    """
    Cards not in `known`, in canonical deck order.

    Distinctness of `known` is the caller's concern; the result always has
    52 - len(set(known)) cards.
    """
    known = set(known)
    return [card for card in _DECK if card not in known]
