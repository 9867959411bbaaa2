from jersey_guess.errors import ValidationError

SCORE_COUNT_FIELDS = ('correctAnswers', 'wrongAnswers', 'skippedAnswers')


def _is_int(value) -> bool:
    # bool is an int subclass; JSON true/false must not pass as a count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_score_payload(data) -> dict:
    """Validate an inbound score submission and fill in defaults.

    Unknown keys are dropped. Raises ValidationError naming the first bad field.
    """
    if not isinstance(data, dict):
        raise ValidationError('Score payload must be a JSON object')

    player_name = data.get('playerName')
    if player_name is not None and not isinstance(player_name, str):
        raise ValidationError('playerName must be a string', {'field': 'playerName'})

    level = data.get('level')
    if not _is_int(level) or level < 1:
        raise ValidationError('level must be a positive integer', {'field': 'level'})

    cleaned = {'playerName': player_name, 'level': level}
    for field in SCORE_COUNT_FIELDS:
        value = data.get(field)
        if value is None:
            value = 0
        if not _is_int(value) or value < 0:
            raise ValidationError(f'{field} must be a non-negative integer', {'field': field})
        cleaned[field] = value
    return cleaned
