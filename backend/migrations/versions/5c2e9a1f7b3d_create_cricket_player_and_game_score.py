"""create cricket_player and game_score tables

Revision ID: 5c2e9a1f7b3d
Revises:
Create Date: 2025-09-02 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2e9a1f7b3d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'cricket_player' not in existing_tables:
        op.create_table(
            'cricket_player',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('name', sa.Text(), nullable=False),
            sa.Column('jersey', sa.Integer(), nullable=False),
            sa.Column('hint', sa.Text(), nullable=False),
            sa.Column('team', sa.String(length=64), nullable=False),
            sa.Column('difficulty', sa.String(length=16), nullable=False),
        )
        op.create_index('ix_cricket_player_difficulty', 'cricket_player', ['difficulty'])

    if 'game_score' not in existing_tables:
        op.create_table(
            'game_score',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('player_name', sa.Text(), nullable=True),
            sa.Column('level', sa.Integer(), nullable=False),
            sa.Column('correct_answers', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('wrong_answers', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('skipped_answers', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('completed_at', sa.String(length=32), nullable=False),
        )
        op.create_index('ix_game_score_correct_answers', 'game_score', ['correct_answers'])


def downgrade():
    op.drop_index('ix_game_score_correct_answers', table_name='game_score')
    op.drop_table('game_score')
    op.drop_index('ix_cricket_player_difficulty', table_name='cricket_player')
    op.drop_table('cricket_player')
