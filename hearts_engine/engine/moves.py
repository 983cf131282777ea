import operator
from dataclasses import dataclass
from typing import Sequence, SupportsIndex


@dataclass(frozen=True)
class Pass:
    """
    Cards picked to be passed during the pass phase. Accepts card indexes or
    :class:`Card` objects.
    """
    cards: Sequence[SupportsIndex]

    def __post_init__(self):
        object.__setattr__(self, 'cards', tuple(operator.index(card) for card in self.cards))


@dataclass(frozen=True)
class PlayCard:
    """A card played into the current trick"""
    card: SupportsIndex

    def __post_init__(self):
        object.__setattr__(self, 'card', operator.index(self.card))

    @property
    def cards(self) -> tuple[int, ...]:
        return (self.card,)


Move = Pass | PlayCard
