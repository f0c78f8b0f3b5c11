"""Create users, items, bids and questions tables

Revision ID: 4c1e7a9b2d10
Revises:
Create Date: 2026-10-18 10:12:41.503912

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e7a9b2d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('salt', sa.String(), nullable=False),
        sa.Column('session_token', sa.String(), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_session_token', 'users', ['session_token'], unique=True)

    op.create_table(
        'items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('starting_bid', sa.Float(), nullable=False),
        sa.Column('start_date', sa.BigInteger(), nullable=False),
        sa.Column('end_date', sa.BigInteger(), nullable=False),
        sa.Column('creator_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.CheckConstraint('starting_bid > 0', name='ck_item_starting_bid_positive'),
        sa.CheckConstraint('end_date > start_date', name='ck_item_window'),
    )
    op.create_index('ix_items_id', 'items', ['id'])
    op.create_index('ix_items_end_date', 'items', ['end_date'])
    op.create_index('ix_items_creator_id', 'items', ['creator_id'])
    op.create_index('idx_item_creator_end', 'items', ['creator_id', 'end_date'])

    op.create_table(
        'bids',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('item_id', sa.Integer(), sa.ForeignKey('items.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('timestamp', sa.BigInteger(), nullable=False),
    )
    op.create_index('ix_bids_id', 'bids', ['id'])
    op.create_index('ix_bids_item_id', 'bids', ['item_id'])
    op.create_index('idx_bid_item_amount', 'bids', ['item_id', 'amount'])
    op.create_index('idx_bid_user', 'bids', ['user_id'])

    op.create_table(
        'questions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('item_id', sa.Integer(), sa.ForeignKey('items.id'), nullable=False),
        sa.Column('asked_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=True),
    )
    op.create_index('ix_questions_id', 'questions', ['id'])
    op.create_index('ix_questions_item_id', 'questions', ['item_id'])


def downgrade() -> None:
    op.drop_table('questions')
    op.drop_table('bids')
    op.drop_table('items')
    op.drop_table('users')
