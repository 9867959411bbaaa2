"""Score Store and catalog persistence.

Routes and the game surface only see the ``Storage`` interface; the backing
store is picked by ``STORAGE_BACKEND`` when the app is created.
"""

from typing import Iterable, List, Optional
import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from jersey_guess.catalog_data import SEED_PLAYERS
from jersey_guess.errors import StoreUnavailable
from jersey_guess.models import CricketPlayer, GameScore, new_id, utc_timestamp

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'jersey_guess.storage'


class Storage:
    """Interface every backing store implements."""

    def get_all_cricket_players(self) -> List[dict]:
        raise NotImplementedError

    def get_cricket_player(self, player_id: str) -> Optional[dict]:
        raise NotImplementedError

    def create_cricket_player(self, data: dict) -> dict:
        raise NotImplementedError

    def save_game_score(self, data: dict) -> dict:
        """Persist a validated score payload and return the stored record."""
        raise NotImplementedError

    def get_top_scores(self, limit: int = 10) -> List[dict]:
        """Records ordered by correctAnswers, highest first; ties keep save order."""
        raise NotImplementedError

    def seed_catalog(self, players: Iterable[dict] = SEED_PLAYERS) -> int:
        count = 0
        for player in players:
            self.create_cricket_player(player)
            count += 1
        return count


def _score_record(data: dict) -> dict:
    return {
        'id': new_id(),
        'playerName': data.get('playerName'),
        'level': data['level'],
        'correctAnswers': data.get('correctAnswers') or 0,
        'wrongAnswers': data.get('wrongAnswers') or 0,
        'skippedAnswers': data.get('skippedAnswers') or 0,
        'completedAt': utc_timestamp(),
    }


class MemStorage(Storage):
    """Dict-backed store, seeded with the catalog on construction."""

    def __init__(self, seed: bool = True) -> None:
        self._cricket_players: dict = {}
        self._game_scores: dict = {}
        if seed:
            self.seed_catalog()

    def get_all_cricket_players(self):
        return [dict(p) for p in self._cricket_players.values()]

    def get_cricket_player(self, player_id):
        player = self._cricket_players.get(player_id)
        return dict(player) if player else None

    def create_cricket_player(self, data):
        player = {
            'id': new_id(),
            'name': data['name'],
            'jersey': data['jersey'],
            'hint': data['hint'],
            'team': data['team'],
            'difficulty': data['difficulty'],
        }
        self._cricket_players[player['id']] = player
        return dict(player)

    def save_game_score(self, data):
        record = _score_record(data)
        self._game_scores[record['id']] = record
        return dict(record)

    def get_top_scores(self, limit=10):
        # sorted() is stable, so equal scores stay in insertion order
        ranked = sorted(self._game_scores.values(), key=lambda s: s['correctAnswers'], reverse=True)
        return [dict(s) for s in ranked[:limit]]


class SqlStorage(Storage):
    """Flask-SQLAlchemy backed store. Needs an application context."""

    def __init__(self, db) -> None:
        self.db = db

    def _fail(self, action: str, exc: Exception):
        self.db.session.rollback()
        logger.error(f"[store-error] {action}: {exc}")
        raise StoreUnavailable(f'Could not {action}', {'cause': str(exc)}) from exc

    def get_all_cricket_players(self):
        try:
            return [p.to_dict() for p in CricketPlayer.query.all()]
        except SQLAlchemyError as exc:
            self._fail('load cricket players', exc)

    def get_cricket_player(self, player_id):
        try:
            player = self.db.session.get(CricketPlayer, player_id)
        except SQLAlchemyError as exc:
            self._fail('load cricket player', exc)
        return player.to_dict() if player else None

    def create_cricket_player(self, data):
        player = CricketPlayer(
            name=data['name'],
            jersey=data['jersey'],
            hint=data['hint'],
            team=data['team'],
            difficulty=data['difficulty'],
        )
        try:
            self.db.session.add(player)
            self.db.session.commit()
        except SQLAlchemyError as exc:
            self._fail('create cricket player', exc)
        return player.to_dict()

    def save_game_score(self, data):
        score = GameScore(
            player_name=data.get('playerName'),
            level=data['level'],
            correct_answers=data.get('correctAnswers') or 0,
            wrong_answers=data.get('wrongAnswers') or 0,
            skipped_answers=data.get('skippedAnswers') or 0,
        )
        try:
            self.db.session.add(score)
            self.db.session.commit()
        except SQLAlchemyError as exc:
            self._fail('save game score', exc)
        return score.to_dict()

    def get_top_scores(self, limit=10):
        try:
            scores = (
                GameScore.query
                .order_by(GameScore.correct_answers.desc(), GameScore.completed_at.asc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as exc:
            self._fail('load top scores', exc)
        return [s.to_dict() for s in scores]

    def seed_catalog(self, players=SEED_PLAYERS):
        # single commit for the whole batch
        rows = [
            CricketPlayer(name=p['name'], jersey=p['jersey'], hint=p['hint'], team=p['team'], difficulty=p['difficulty'])
            for p in players
        ]
        try:
            self.db.session.add_all(rows)
            self.db.session.commit()
        except SQLAlchemyError as exc:
            self._fail('seed cricket players', exc)
        return len(rows)

    def catalog_is_empty(self) -> bool:
        try:
            return CricketPlayer.query.first() is None
        except SQLAlchemyError as exc:
            self._fail('inspect cricket players', exc)


def build_storage(app, db) -> Storage:
    backend = app.config.get('STORAGE_BACKEND', 'memory')
    if backend == 'sql':
        return SqlStorage(db)
    if backend != 'memory':
        app.logger.warning(f"[storage] unknown STORAGE_BACKEND={backend!r}, using memory")
    return MemStorage()


def get_storage() -> Storage:
    return current_app.extensions[EXTENSION_KEY]
