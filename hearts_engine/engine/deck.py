import numpy as np

from .constants import CARDS_IN_DECK_COUNT, PLAYER_COUNT
from .hand import sort_hand


def deal(rng: np.random.Generator) -> list[list[int]]:
    """
    Deals the whole deck between the players, one card at a time.

    Each card is drawn uniformly from the cards left in the deck (a partial
    Fisher-Yates shuffle) and the dealing goes round-robin, starting with
    the first player.

    Returns:
        A list of 4 hands, each sorted in ascending order
    """
    deck = list(range(CARDS_IN_DECK_COUNT))
    hands: list[list[int]] = [[] for _ in range(PLAYER_COUNT)]

    player_idx = 0
    cards_left = CARDS_IN_DECK_COUNT
    while cards_left > 0:
        drawn_idx = int(rng.integers(cards_left))
        cards_left -= 1
        # the drawn card is replaced by the last card still in the deck
        card = deck[drawn_idx]
        deck[drawn_idx] = deck[cards_left]
        hands[player_idx].append(card)
        player_idx = (player_idx + 1) % PLAYER_COUNT

    return [sort_hand(hand) for hand in hands]
