import os
import sys
import pytest

# Ensure the backend root (containing the `jersey_guess` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from jersey_guess import create_app, db, socketio
from jersey_guess.services.game.catalog import Catalog, Entity
from jersey_guess.services.game.timers import ManualScheduler


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    STORAGE_BACKEND = 'memory'
    ADVANCE_DELAY_SEC = 4
    TOP_SCORES_LIMIT = 10
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'


class SqlTestConfig(TestConfig):
    STORAGE_BACKEND = 'sql'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def sql_app():
    application = create_app(SqlTestConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


def make_catalog(per_tier=6):
    """Small catalog with ``per_tier`` distinct players in each tier."""
    entities = []
    for tier in ('easy', 'medium', 'hard', 'expert'):
        for i in range(per_tier):
            entities.append(Entity(
                id=f'{tier}-{i}',
                name=f'{tier.title()} Player {i}',
                jersey=i + 1,
                hint=f'{tier} hint {i}',
                team='Testland',
                difficulty=tier,
            ))
    return Catalog(entities)


@pytest.fixture()
def catalog():
    return make_catalog()


@pytest.fixture()
def scheduler():
    return ManualScheduler()
