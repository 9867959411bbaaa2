from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import logging
import click
from jersey_guess.config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    level = str(flask_app.config.get('LOG_LEVEL', 'INFO')).upper()
    logging.getLogger('jersey_guess').setLevel(getattr(logging, level, logging.INFO))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Models must be imported before the store so the tables are registered
    from jersey_guess import models  # noqa: F401
    from jersey_guess.storage import EXTENSION_KEY, build_storage
    flask_app.extensions[EXTENSION_KEY] = build_storage(flask_app, db)

    from jersey_guess.main import main
    flask_app.register_blueprint(main)

    from jersey_guess.api.routes import api
    flask_app.register_blueprint(api, url_prefix='/api')

    from jersey_guess.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from jersey_guess.storage import SqlStorage
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            count = SqlStorage(db).seed_catalog()
            print(f'Database has been reset and seeded with {count} players!')

    @click.command('seed-catalog')
    def seed_catalog_command():
        """Seeds the cricket player table if it is empty."""
        from jersey_guess.storage import SqlStorage
        with flask_app.app_context():
            store = SqlStorage(db)
            if not store.catalog_is_empty():
                print('Catalog already seeded.')
                return
            print(f'Seeded {store.seed_catalog()} players.')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(seed_catalog_command)

    return flask_app
