"""
Helpers operating on hands. A hand is a list of card indexes sorted in
ascending order. None of the functions here modify their arguments.
"""
from typing import Iterable

from .card import suit_of
from .constants import Suit


def sort_hand(cards: Iterable[int]) -> list[int]:
    return sorted(cards)


def merge_sorted(hand: list[int], incoming: Iterable[int]) -> list[int]:
    """
    Merges cards into an already sorted hand.

    Args:
        hand: Sorted hand
        incoming: Cards to add, in any order

    Returns:
        A new sorted hand containing the cards from both arguments
    """
    incoming = sort_hand(incoming)
    merged = []
    i = j = 0
    while i < len(hand) and j < len(incoming):
        if hand[i] < incoming[j]:
            merged.append(hand[i])
            i += 1
        else:
            merged.append(incoming[j])
            j += 1
    merged.extend(hand[i:])
    merged.extend(incoming[j:])
    return merged


def remove_cards(hand: list[int], cards: Iterable[int]) -> list[int]:
    to_remove = set(cards)
    return [card for card in hand if card not in to_remove]


def has_cards(hand: list[int], cards: Iterable[int]) -> bool:
    held = set(hand)
    return all(card in held for card in cards)


def has_suit(hand: list[int], suit: Suit) -> bool:
    return any(suit_of(card) == suit for card in hand)


def only_suit(hand: list[int], suit: Suit) -> bool:
    return all(suit_of(card) == suit for card in hand)
