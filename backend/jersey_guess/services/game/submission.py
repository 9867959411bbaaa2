"""Score Submission Client.

Packages a finished game's tallies and hands them to a transport. Transports
expose ``post_score(payload) -> record``: ``StorageTransport`` writes to the
injected store in-process, ``jersey_guess.client.ApiClient`` posts over HTTP.
"""

from __future__ import annotations

import logging

from jersey_guess.errors import NameRequired, SaveFailed, StoreUnavailable
from jersey_guess.schemas import validate_score_payload

logger = logging.getLogger(__name__)


class StorageTransport:
    def __init__(self, storage) -> None:
        self._storage = storage

    def post_score(self, payload: dict) -> dict:
        cleaned = validate_score_payload(payload)
        try:
            return self._storage.save_game_score(cleaned)
        except StoreUnavailable as exc:
            raise SaveFailed('Score store unavailable', exc.details) from exc


class ScoreSubmissionClient:
    def __init__(self, transport) -> None:
        self._transport = transport

    def submit(self, name, level: int, correct_count: int, wrong_count: int, skipped_count: int) -> dict:
        """Send the tallies and return the stored record.

        Raises NameRequired before contacting the store when ``name`` is blank,
        ValidationError when the store rejects the payload and SaveFailed when
        it cannot be reached.
        """
        player_name = name.strip() if isinstance(name, str) else ''
        if not player_name:
            raise NameRequired('A player name is required to save a score')

        payload = {
            'playerName': player_name,
            'level': level,
            'correctAnswers': correct_count,
            'wrongAnswers': wrong_count,
            'skippedAnswers': skipped_count,
        }
        record = self._transport.post_score(payload)
        logger.info(f"[score-saved] id={record.get('id')} name={player_name!r} correct={correct_count}")
        return record
