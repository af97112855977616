"""
Card Deck - composable playing-card deck builder.

Builds the standard 52-card deck and pipes it through transforms such as
sorting, shuffling, filtering, adding jokers and multiplying the deck.

Examples:
    >>> from card_deck import build, jokers, shuffle
    >>> cards = build(jokers(2), shuffle)
    >>> len(cards)
    54
"""

from .core import (
    Suit, Rank, STANDARD_SUITS, MIN_RANK, MAX_RANK, get_all_suits, get_all_ranks,
    Card, abs_rank, Deck, Transform, Less, LessFactory,
    DeckError, InvalidCardError, InvalidCountError,
    new_standard_deck, build,
    less, rank_less, suit_less, reverse, sort_cards, default_sort,
    make_shuffle, shuffle,
    jokers, filter_cards, multiply,
)
from .config import DeckConfig, LoggingConfig, configure_logging

__version__ = "0.1.0"

__all__ = [
    # Types
    'Suit', 'Rank', 'STANDARD_SUITS', 'MIN_RANK', 'MAX_RANK', 'get_all_suits', 'get_all_ranks',
    'Card', 'abs_rank', 'Deck', 'Transform', 'Less', 'LessFactory',

    # Errors
    'DeckError', 'InvalidCardError', 'InvalidCountError',

    # Construction and transforms
    'new_standard_deck', 'build',
    'less', 'rank_less', 'suit_less', 'reverse', 'sort_cards', 'default_sort',
    'make_shuffle', 'shuffle',
    'jokers', 'filter_cards', 'multiply',

    # Configuration
    'DeckConfig', 'LoggingConfig', 'configure_logging',
]
