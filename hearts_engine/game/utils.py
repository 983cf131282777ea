from typing import Iterable

from hearts_engine.engine import Card


def to_cards(cards_idx: Iterable[int]) -> list[Card]:
    return [Card(i) for i in cards_idx]
