from flask import Blueprint, jsonify, request, current_app
from jersey_guess.errors import StoreUnavailable, ValidationError
from jersey_guess.schemas import validate_score_payload
from jersey_guess.storage import get_storage


api = Blueprint('api', __name__)


@api.route('/cricket-players', methods=['GET'])
def get_cricket_players():
    try:
        players = get_storage().get_all_cricket_players()
    except StoreUnavailable as exc:
        current_app.logger.error(f"[players] store unavailable: {exc.message}")
        return jsonify({'message': 'Failed to fetch cricket players'}), 500
    return jsonify(players)


@api.route('/game-scores', methods=['POST'])
def save_game_score():
    data = request.get_json(silent=True)
    try:
        validated = validate_score_payload(data)
    except ValidationError as exc:
        current_app.logger.info(f"[score-invalid] {exc.message}")
        return jsonify({'message': 'Invalid score data'}), 400
    try:
        score = get_storage().save_game_score(validated)
    except StoreUnavailable as exc:
        current_app.logger.error(f"[score-save] store unavailable: {exc.message}")
        return jsonify({'message': 'Failed to save score'}), 500
    current_app.logger.info(
        f"[score-save] id={score['id']} level={score['level']} correct={score['correctAnswers']}"
    )
    return jsonify(score)


@api.route('/top-scores', methods=['GET'])
def get_top_scores():
    limit = int(current_app.config.get('TOP_SCORES_LIMIT', 10))
    try:
        scores = get_storage().get_top_scores(limit)
    except StoreUnavailable as exc:
        current_app.logger.error(f"[top-scores] store unavailable: {exc.message}")
        return jsonify({'message': 'Failed to fetch top scores'}), 500
    return jsonify(scores)
