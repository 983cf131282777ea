from .player import Player


def round_deductions(round_scores: list[int], max_points: int) -> list[int]:
    """
    Points subtracted from each player's game score at the end of a round.
    Takes the moon shot into account.
    """
    if max_points in round_scores:
        shooter_idx = round_scores.index(max_points)
        return [0 if i == shooter_idx else max_points for i in range(len(round_scores))]
    return list(round_scores)


def apply_round_scores(players: list[Player], max_points: int) -> list[int]:
    """
    Moves the points collected in the round into the players' game scores
    and resets the round scores.

    Returns:
        The deductions that were applied
    """
    deductions = round_deductions([p.round_score for p in players], max_points)
    for player, deduction in zip(players, deductions):
        player.game_score -= deduction
        player.round_score = 0
    return deductions


def winners(game_scores: list[int]) -> list[int]:
    """Players with the highest game score, i.e. furthest from losing"""
    best = max(game_scores)
    return [i for i, score in enumerate(game_scores) if score == best]
