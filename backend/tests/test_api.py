from jersey_guess.catalog_data import SEED_PLAYERS
from jersey_guess.errors import StoreUnavailable
from jersey_guess.storage import EXTENSION_KEY


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'Jersey Guess' in res.get_json()['message']


def test_get_cricket_players(client):
    res = client.get('/api/cricket-players')
    assert res.status_code == 200
    players = res.get_json()
    assert len(players) == len(SEED_PLAYERS)
    dhoni = next(p for p in players if p['name'] == 'MS Dhoni')
    assert dhoni['jersey'] == 7
    assert dhoni['difficulty'] == 'easy'
    assert dhoni['team'] == 'India'
    assert dhoni['id']


def test_save_game_score_with_defaults(client):
    res = client.post('/api/game-scores', json={'level': 20, 'correctAnswers': 42})
    assert res.status_code == 200
    score = res.get_json()
    assert score['playerName'] is None
    assert score['level'] == 20
    assert score['correctAnswers'] == 42
    assert score['wrongAnswers'] == 0
    assert score['skippedAnswers'] == 0
    assert score['id']
    assert score['completedAt'].endswith('Z')


def test_save_game_score_full_payload(client):
    payload = {
        'playerName': 'Alice',
        'level': 20,
        'correctAnswers': 70,
        'wrongAnswers': 20,
        'skippedAnswers': 10,
    }
    res = client.post('/api/game-scores', json=payload)
    assert res.status_code == 200
    score = res.get_json()
    for key, value in payload.items():
        assert score[key] == value


def test_save_game_score_rejects_invalid_body(client):
    bad_payloads = [
        {},
        {'level': 'twenty'},
        {'level': 20, 'correctAnswers': -1},
        {'level': 20, 'wrongAnswers': True},
        {'level': 20, 'playerName': 7},
        [1, 2, 3],
    ]
    for payload in bad_payloads:
        res = client.post('/api/game-scores', json=payload)
        assert res.status_code == 400, payload
        assert res.get_json() == {'message': 'Invalid score data'}

    res = client.post('/api/game-scores', data='not json', content_type='application/json')
    assert res.status_code == 400
    # nothing reached the store
    assert client.get('/api/top-scores').get_json() == []


def test_top_scores_ordered_by_correct_answers(client):
    for correct in (10, 55, 30):
        assert client.post('/api/game-scores', json={'level': 20, 'correctAnswers': correct}).status_code == 200
    res = client.get('/api/top-scores')
    assert res.status_code == 200
    assert [s['correctAnswers'] for s in res.get_json()] == [55, 30, 10]


def test_top_scores_limited_to_ten(client):
    for correct in range(12):
        client.post('/api/game-scores', json={'level': 20, 'correctAnswers': correct})
    scores = client.get('/api/top-scores').get_json()
    assert len(scores) == 10
    assert scores[0]['correctAnswers'] == 11
    assert scores[-1]['correctAnswers'] == 2


class _BrokenStorage:
    def get_all_cricket_players(self):
        raise StoreUnavailable('down')

    def get_top_scores(self, limit=10):
        raise StoreUnavailable('down')

    def save_game_score(self, data):
        raise StoreUnavailable('down')


def test_store_failures_return_500(flask_app, client):
    flask_app.extensions[EXTENSION_KEY] = _BrokenStorage()
    res = client.get('/api/cricket-players')
    assert res.status_code == 500
    assert res.get_json() == {'message': 'Failed to fetch cricket players'}
    res = client.get('/api/top-scores')
    assert res.status_code == 500
    assert res.get_json() == {'message': 'Failed to fetch top scores'}
    res = client.post('/api/game-scores', json={'level': 1})
    assert res.status_code == 500


def test_sql_backend_round_trip(sql_app):
    from jersey_guess.storage import SqlStorage, get_storage

    store = get_storage()
    assert isinstance(store, SqlStorage)
    assert store.catalog_is_empty()
    assert store.seed_catalog() == len(SEED_PLAYERS)

    client = sql_app.test_client()
    players = client.get('/api/cricket-players').get_json()
    assert len(players) == len(SEED_PLAYERS)
    assert store.get_cricket_player(players[0]['id'])['name'] == players[0]['name']

    for name, correct in (('a', 10), ('b', 55), ('c', 30)):
        res = client.post('/api/game-scores', json={'playerName': name, 'level': 20, 'correctAnswers': correct})
        assert res.status_code == 200
    top = client.get('/api/top-scores').get_json()
    assert [s['playerName'] for s in top] == ['b', 'c', 'a']


def test_sql_backend_keeps_long_player_names(sql_app):
    from jersey_guess.models import CricketPlayer, GameScore
    from jersey_guess import db

    assert isinstance(GameScore.__table__.c.player_name.type, db.Text)
    assert isinstance(CricketPlayer.__table__.c.name.type, db.Text)

    long_name = 'N' * 200
    client = sql_app.test_client()
    res = client.post('/api/game-scores', json={'playerName': long_name, 'level': 20, 'correctAnswers': 7})
    assert res.status_code == 200
    assert res.get_json()['playerName'] == long_name
    assert client.get('/api/top-scores').get_json()[0]['playerName'] == long_name
