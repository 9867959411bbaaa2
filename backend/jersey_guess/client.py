"""HTTP client for the Jersey Guess API.

Used outside the server process: loads the catalog a local session plays
from, and acts as the transport for ``ScoreSubmissionClient``.
"""

from typing import List, Optional
import logging

import requests

from jersey_guess.errors import SaveFailed, StoreUnavailable, ValidationError
from jersey_guess.services.game.catalog import Catalog

logger = logging.getLogger(__name__)


class ApiClient:
    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get_json(self, path: str):
        try:
            response = self.session.get(self._url(path), timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"[api-error] GET {path}: {e}")
            raise StoreUnavailable(f'Failed to fetch {path}', {'cause': str(e)}) from e

    def fetch_players(self) -> List[dict]:
        return self._get_json('/api/cricket-players')

    def fetch_catalog(self) -> Catalog:
        return Catalog.from_dicts(self.fetch_players())

    def fetch_top_scores(self) -> List[dict]:
        return self._get_json('/api/top-scores')

    def post_score(self, payload: dict) -> dict:
        try:
            response = self.session.post(self._url('/api/game-scores'), json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"[api-error] POST /api/game-scores: {e}")
            raise SaveFailed('Could not reach the score service', {'cause': str(e)}) from e

        if response.status_code == 400:
            raise ValidationError('Invalid score data', {'status': 400})
        if response.status_code >= 300:
            raise SaveFailed(f'Score service answered {response.status_code}', {'status': response.status_code})
        try:
            return response.json()
        except ValueError as e:
            raise SaveFailed('Score service returned an unreadable response') from e
