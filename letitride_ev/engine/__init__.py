"""
Let It Ride evaluation engine components.
"""

from .deck import Card, Suit, RANKS, RANK_ORDER, all_cards, remaining, parse_card
from .errors import ErrorKind, ValidationError, IncompleteSelection, DuplicateCard, InvalidCard, UnknownPreset
from .hand_classifier import HandCategory, CATEGORIES, classify_hand
from .paytable import Paytable, STANDARD_PAYTABLE
from .enumerator import EnumerationEngine, EnumerationResult, BreakdownEntry, evaluate
