"""
Utilities for tests
"""
from hearts_engine.engine import Card, Suit, HeartsCore, HeartsRules, Phase


def c(card_str: str) -> Card:
    """
    A quick way to parse a Card object from a string e.g. "10♥"
    """
    rank_str = card_str[:-1]
    suit_str = card_str[-1]
    suit = [s for s in list(Suit) if s.value == suit_str][0]
    return Card.of(rank_str, suit)


def cl(cards_str: list[str]) -> list[Card]:
    """
    A quick way to parse a list of Card object from a string e.g. ["10♥", "Q♣"]
    """
    return [c(s) for s in cards_str]


def cli(cards_str: list[str]) -> list[int]:
    """
    Same as ``cl`` but returns sorted card indexes, as the engine keeps them
    """
    return sorted(card.idx for card in cl(cards_str))


def get_core_with_hands(hands: list[list[str]],
                        trick_no: int = 1,
                        last_taken: int | None = None,
                        are_hearts_broken: bool = False,
                        rules: HeartsRules = HeartsRules()) -> HeartsCore:
    """
    Engine in the play phase with the given hands, as if part of the round
    had already been played
    """
    core = HeartsCore(rules=rules, random_state=0)
    for player, hand in zip(core._players, hands):
        player.hand = cli(hand)
    core._phase = Phase.PLAY
    core._trick_no = trick_no
    core._last_taken = last_taken
    core._are_hearts_broken = are_hearts_broken
    return core


def cla(cards_str: list[str]) -> list[int]:
    """
    Card indexes in the given order (useful for tricks)
    """
    return [card.idx for card in cl(cards_str)]
