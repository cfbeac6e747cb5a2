"""create users and friends tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00.000000

friends holds directed edges; each friendship is two rows, (A, B) and (B, A).
Both foreign keys are RESTRICT: a user with friends cannot be deleted.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index('ix_users_user_id', 'users', ['user_id'])

    op.create_table(
        'friends',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('friend_user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('user_id', 'friend_user_id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['friend_user_id'], ['users.user_id'], ondelete='RESTRICT'),
        sa.CheckConstraint('user_id <> friend_user_id', name='ck_friends_not_self'),
    )
    op.create_index('ix_friends_friend_user_id', 'friends', ['friend_user_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_friends_friend_user_id', table_name='friends')
    op.drop_table('friends')
    op.drop_index('ix_users_user_id', table_name='users')
    op.drop_table('users')
