"""
Let It Ride EV Calculator
"""

from .engine.deck import Card, Suit, all_cards, remaining, parse_card
from .engine.errors import ValidationError, IncompleteSelection, DuplicateCard, InvalidCard
from .engine.hand_classifier import HandCategory, classify_hand
from .engine.paytable import Paytable, STANDARD_PAYTABLE
from .engine.enumerator import EnumerationEngine, EnumerationResult, evaluate

__version__ = "0.1.0"
