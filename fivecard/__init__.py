"""
Five-card poker hand evaluation.

This package classifies a 5-card poker hand into one of nine categories and
computes an exact integer score so that two hands can be compared for a winner.
"""

import random
from typing import Iterable, Optional

from .core.deck import Suit, Rank, Card, Deck, get_all_suits, get_all_ranks, get_rank_name, get_suit_name
from .core.eval import Hand, HandCategory, HandEvaluator, HandResult, ShowdownOutcome, HAND_SIZE
from .core.exceptions import (
    PokerHandError,
    InvalidCardError,
    HandSizeError,
    DuplicateCardError,
    DeckExhaustedError,
    ConfigError,
)

__version__ = "1.0.0"


# Convenience functions for common operations
def new_deck(shuffle: bool = True, seed: Optional[int] = None) -> Deck:
    """Create a new deck of cards.

    Args:
        shuffle: Whether to shuffle the deck after creation.
        seed: Seed for the deck's own random generator. None draws fresh entropy.

    Returns:
        A new deck of cards.
    """
    deck = Deck(random.Random(seed))
    if shuffle:
        deck.shuffle()
    return deck


def evaluate(cards: Iterable[Card]) -> HandResult:
    """Evaluate a 5-card poker hand.

    Args:
        cards: Exactly five distinct Card objects, in any order.

    Returns:
        HandResult containing the category and score.
    """
    return HandEvaluator().evaluate(cards)


__all__ = [
    # Card model
    'Suit', 'Rank', 'Card', 'Deck',
    'get_all_suits', 'get_all_ranks', 'get_rank_name', 'get_suit_name',

    # Evaluation
    'Hand', 'HandCategory', 'HandEvaluator', 'HandResult', 'ShowdownOutcome', 'HAND_SIZE',

    # Errors
    'PokerHandError', 'InvalidCardError', 'HandSizeError', 'DuplicateCardError',
    'DeckExhaustedError', 'ConfigError',

    # Convenience functions
    'new_deck', 'evaluate',
]
