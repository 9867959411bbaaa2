from jersey_guess.socketio_events import _sessions, get_scheduler


def _events(sio_client, name):
    return [e for e in sio_client.get_received('/ws') if e['name'] == name]


def _session_for(sio_client):
    # one client per test, so the only live session for it is the newest one
    return list(_sessions.values())[-1]


def test_socket_connect(sio_client):
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'connected' for pkt in received)


def test_start_game_sends_first_question(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('start_game', namespace='/ws')
    questions = _events(sio_client, 'question')
    assert len(questions) == 1
    state = questions[0]['args'][0]
    assert state['level'] == 1
    assert state['question_in_level'] == 1
    assert state['time_remaining'] == 15
    assert len(state['question']['options']) == 4
    assert 'correct_index' not in state['question']


def test_actions_before_start_report_error(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('skip_question', namespace='/ws')
    errors = _events(sio_client, 'error')
    assert errors and 'start_game' in errors[0]['args'][0]['message']


def test_skip_then_advance_after_delay(flask_app, sio_client):
    sio_client.emit('start_game', namespace='/ws')
    sio_client.get_received('/ws')

    sio_client.emit('skip_question', namespace='/ws')
    results = _events(sio_client, 'answer_result')
    assert len(results) == 1
    result = results[0]['args'][0]
    assert result['kind'] == 'skipped'
    assert result['session']['skipped_count'] == 1

    get_scheduler(flask_app).advance(flask_app.config['ADVANCE_DELAY_SEC'])
    questions = _events(sio_client, 'question')
    assert len(questions) == 1
    state = questions[0]['args'][0]
    assert state['question_in_level'] == 2
    assert state['total_answered'] == 1


def test_select_answer_validates_index(sio_client):
    sio_client.emit('start_game', namespace='/ws')
    sio_client.get_received('/ws')
    sio_client.emit('select_answer', {'index': 'A'}, namespace='/ws')
    assert _events(sio_client, 'error')


def test_select_correct_answer(sio_client):
    sio_client.emit('start_game', namespace='/ws')
    sio_client.get_received('/ws')
    session = _session_for(sio_client)
    sio_client.emit('select_answer', {'index': session.question.correct_index}, namespace='/ws')
    result = _events(sio_client, 'answer_result')[0]['args'][0]
    assert result['correct'] is True
    assert result['session']['correct_count'] == 1


def test_ticks_are_pushed_to_the_client(flask_app, sio_client):
    sio_client.emit('start_game', namespace='/ws')
    sio_client.get_received('/ws')
    get_scheduler(flask_app).advance(3)
    ticks = _events(sio_client, 'tick')
    assert [t['args'][0]['time_remaining'] for t in ticks] == [14, 13, 12]


def _play_full_game(flask_app, sio_client):
    scheduler = get_scheduler(flask_app)
    delay = flask_app.config['ADVANCE_DELAY_SEC']
    sio_client.emit('start_game', namespace='/ws')
    for level in range(1, 21):
        for _ in range(5):
            sio_client.emit('skip_question', namespace='/ws')
            scheduler.advance(delay)
        if level < 20:
            sio_client.emit('next_level', namespace='/ws')
    sio_client.get_received('/ws')


def test_full_game_and_save_score(flask_app, client, sio_client):
    _play_full_game(flask_app, sio_client)

    sio_client.emit('get_state', namespace='/ws')
    state = _events(sio_client, 'state')[0]['args'][0]
    assert state['state'] == 'game_complete'
    assert state['total_answered'] == 100
    assert state['skipped_count'] == 100

    sio_client.emit('save_score', {'player_name': '  '}, namespace='/ws')
    assert _events(sio_client, 'name_required')
    assert client.get('/api/top-scores').get_json() == []

    sio_client.emit('save_score', {'player_name': 'Skipper'}, namespace='/ws')
    saved = _events(sio_client, 'score_saved')
    assert saved[0]['args'][0]['record']['playerName'] == 'Skipper'
    top = client.get('/api/top-scores').get_json()
    assert len(top) == 1
    assert top[0]['skippedAnswers'] == 100
    assert top[0]['level'] == 20

    # already saved: no second record
    sio_client.emit('save_score', {'player_name': 'Skipper'}, namespace='/ws')
    assert len(client.get('/api/top-scores').get_json()) == 1


def test_next_level_too_early_is_rejected(sio_client):
    sio_client.emit('start_game', namespace='/ws')
    sio_client.get_received('/ws')
    sio_client.emit('next_level', namespace='/ws')
    assert _events(sio_client, 'error')


def test_restart_game(flask_app, sio_client):
    sio_client.emit('start_game', namespace='/ws')
    sio_client.emit('skip_question', namespace='/ws')
    sio_client.get_received('/ws')
    sio_client.emit('restart_game', namespace='/ws')
    state = _events(sio_client, 'question')[0]['args'][0]
    assert state['skipped_count'] == 0
    assert state['total_answered'] == 0
    assert state['state'] == 'question_active'


def test_disconnect_closes_session(flask_app):
    from jersey_guess import socketio
    test_client = socketio.test_client(flask_app, namespace='/ws')
    test_client.emit('start_game', namespace='/ws')
    session = list(_sessions.values())[-1]
    scheduler = get_scheduler(flask_app)
    assert scheduler.pending() >= 1

    test_client.disconnect(namespace='/ws')
    assert session not in _sessions.values()
    assert scheduler.pending() == 0


def test_save_score_with_non_string_name_asks_for_a_name(flask_app, client, sio_client):
    _play_full_game(flask_app, sio_client)
    for bad_name in (123, ['Alice'], {'first': 'Alice'}):
        sio_client.emit('save_score', {'player_name': bad_name}, namespace='/ws')
        assert _events(sio_client, 'name_required')
    assert client.get('/api/top-scores').get_json() == []

    sio_client.emit('save_score', {'player_name': 'Alice'}, namespace='/ws')
    assert _events(sio_client, 'score_saved')
