"""
This module contains the rules engine of Hearts, in the form of the
:class:`HeartsCore` class, along with the card model and the moves it accepts.
"""

from .card import Card
from .constants import Suit, PassDirection, Phase
from .hearts_core import HeartsCore
from .moves import Move, Pass, PlayCard
from .rules import HeartsRules
from .view import Perspective
