from dataclasses import dataclass, field


@dataclass
class Player:
    """
    State of a single seat at the table.

    Args:
        game_score: Points left before the game ends. Starts at the target
            score and goes down as the player takes points
    """
    game_score: int
    hand: list[int] = field(default_factory=list)
    # point cards taken in this round
    taken: list[int] = field(default_factory=list)
    played: int | None = None
    receiving: list[int] = field(default_factory=list)
    has_passed: bool = False
    round_score: int = 0
