from .engine import HeartsCore, HeartsRules, Card, Pass, PlayCard
