from jersey_guess import db
from datetime import datetime, timezone
import uuid


def new_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-01T10:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class CricketPlayer(db.Model):
    __tablename__ = 'cricket_player'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.Text, nullable=False)
    jersey = db.Column(db.Integer, nullable=False)
    hint = db.Column(db.Text, nullable=False)
    team = db.Column(db.String(64), nullable=False)
    difficulty = db.Column(db.String(16), nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'jersey': self.jersey,
            'hint': self.hint,
            'team': self.team,
            'difficulty': self.difficulty,
        }


class GameScore(db.Model):
    __tablename__ = 'game_score'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    player_name = db.Column(db.Text, nullable=True)
    level = db.Column(db.Integer, nullable=False)
    correct_answers = db.Column(db.Integer, nullable=False, default=0, index=True)
    wrong_answers = db.Column(db.Integer, nullable=False, default=0)
    skipped_answers = db.Column(db.Integer, nullable=False, default=0)
    completed_at = db.Column(db.String(32), nullable=False, default=utc_timestamp)

    def to_dict(self):
        return {
            'id': self.id,
            'playerName': self.player_name,
            'level': self.level,
            'correctAnswers': self.correct_answers,
            'wrongAnswers': self.wrong_answers,
            'skippedAnswers': self.skipped_answers,
            'completedAt': self.completed_at,
        }
