import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///jersey_guess.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # 'memory' keeps everything in process; 'sql' uses SQLALCHEMY_DATABASE_URI
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'memory')
    # Pause after an answer is revealed before the next question (seconds)
    ADVANCE_DELAY_SEC = float(os.environ.get('ADVANCE_DELAY_SEC', '4'))
    TOP_SCORES_LIMIT = int(os.environ.get('TOP_SCORES_LIMIT', '10'))
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173',
        ).split(',')
        if origin.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
