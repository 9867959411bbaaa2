EASY = 'easy'
MEDIUM = 'medium'
HARD = 'hard'
EXPERT = 'expert'

TIERS = (EASY, MEDIUM, HARD, EXPERT)


def tier_for_level(level: int) -> str:
    """Map a level (1-20) to the catalog tier its questions are drawn from."""
    if level <= 5:
        return EASY
    if level <= 12:
        return MEDIUM
    if level <= 18:
        return HARD
    return EXPERT
