from flask import current_app, request
from flask_socketio import emit
from jersey_guess import socketio
from jersey_guess.errors import StoreUnavailable
from jersey_guess.services.game.catalog import Catalog
from jersey_guess.services.game.session import GameSession
from jersey_guess.services.game.submission import ScoreSubmissionClient, StorageTransport
from jersey_guess.services.game.timers import ManualScheduler, SocketIOScheduler
from jersey_guess.storage import get_storage
from typing import Dict, Optional

NAMESPACE = '/ws'
SCHEDULER_KEY = 'jersey_guess.scheduler'

# One game session per connected socket, keyed by sid
_sessions: Dict[str, GameSession] = {}


def _get_sid() -> str:
    return request.sid  # type: ignore


def get_scheduler(app):
    """Shared scheduler for the app. Tests get a virtual clock they can advance."""
    scheduler = app.extensions.get(SCHEDULER_KEY)
    if scheduler is None:
        scheduler = ManualScheduler() if app.config.get('TESTING') else SocketIOScheduler(socketio)
        app.extensions[SCHEDULER_KEY] = scheduler
    return scheduler


def _listener_for(sid: str):
    def _listener(event, payload):
        # may run from a background timer task, so use the server-level emit
        socketio.emit(event, payload, to=sid, namespace=NAMESPACE)
    return _listener


def _new_session(sid: str) -> GameSession:
    app = current_app._get_current_object()
    storage = get_storage()
    catalog = Catalog.from_dicts(storage.get_all_cricket_players())
    return GameSession(
        catalog,
        get_scheduler(app),
        submitter=ScoreSubmissionClient(StorageTransport(storage)),
        listener=_listener_for(sid),
        advance_delay=float(app.config.get('ADVANCE_DELAY_SEC', 4)),
    )


def _current_session() -> Optional[GameSession]:
    session = _sessions.get(_get_sid())
    if session is None:
        emit('error', {'message': 'No game in progress. Send start_game first.'})
    return session


def handle_connect(auth=None):
    emit('connected', {'message': 'Connected to /ws'})


def handle_disconnect(reason=None):
    session = _sessions.pop(_get_sid(), None)
    if session is not None:
        session.close()
        current_app.logger.info(f"[session-closed] sid={_get_sid()} reason={reason}")


def handle_start_game(data=None):
    sid = _get_sid()
    session = _sessions.get(sid)
    if session is not None:
        session.restart()
        return
    try:
        session = _new_session(sid)
    except StoreUnavailable as exc:
        current_app.logger.error(f"[start] sid={sid} catalog unavailable: {exc.message}")
        emit('error', {'message': 'Failed to fetch cricket players'})
        return
    _sessions[sid] = session
    current_app.logger.info(f"[session-open] sid={sid} catalog={len(session.catalog)}")
    session.start()
    if session.question is None:
        emit('error', {'message': 'No cricket players available'})


def handle_select_answer(data):
    index = (data or {}).get('index')
    if not isinstance(index, int) or isinstance(index, bool):
        emit('error', {'message': 'index must be an integer'})
        return
    session = _current_session()
    if session is not None:
        session.select_answer(index)


def handle_skip_question(data=None):
    session = _current_session()
    if session is not None:
        session.skip()


def handle_next_level(data=None):
    session = _current_session()
    if session is not None and not session.next_level():
        emit('error', {'message': 'Level is not complete yet'})


def handle_restart_game(data=None):
    session = _current_session()
    if session is not None:
        session.restart()


def handle_save_score(data):
    session = _current_session()
    if session is not None:
        session.save_score((data or {}).get('player_name'))


def handle_get_state(data=None):
    session = _current_session()
    if session is not None:
        emit('state', session.to_dict())


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the '/ws' namespace."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('start_game', handle_start_game, namespace=NAMESPACE)
    socketio.on_event('select_answer', handle_select_answer, namespace=NAMESPACE)
    socketio.on_event('skip_question', handle_skip_question, namespace=NAMESPACE)
    socketio.on_event('next_level', handle_next_level, namespace=NAMESPACE)
    socketio.on_event('restart_game', handle_restart_game, namespace=NAMESPACE)
    socketio.on_event('save_score', handle_save_score, namespace=NAMESPACE)
    socketio.on_event('get_state', handle_get_state, namespace=NAMESPACE)
