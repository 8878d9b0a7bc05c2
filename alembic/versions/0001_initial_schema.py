"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('accounts',
        sa.Column('id', sa.String(length=36), nullable=False, comment='Account ID (UUID)'),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, comment='Email address'),
        sa.Column('password_hash', sa.String(length=255), nullable=False, comment='Hashed password (argon2)'),
        sa.Column('phone_contact', sa.String(length=50), nullable=True),
        sa.Column('birth_date', sa.String(length=50), nullable=True),
        sa.Column('country', sa.String(length=100), nullable=True),
        sa.Column('about_me', sa.Text(), nullable=True),
        sa.Column('current_address', sa.String(length=500), nullable=True),
        sa.Column('reset_token', sa.String(length=64), nullable=True, comment='SHA-256 hash of the pending password reset token'),
        sa.Column('reset_token_expiry', sa.DateTime(timezone=True), nullable=True, comment='Expiry of the pending password reset token'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.CheckConstraint('(reset_token IS NULL) = (reset_token_expiry IS NULL)', name='ck_accounts_reset_token_pair'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('reset_token')
    )
    with op.batch_alter_table('accounts', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_accounts_email'), ['email'], unique=False)

    op.create_table('study_groups',
        sa.Column('id', sa.String(length=36), nullable=False, comment='Group ID (UUID)'),
        sa.Column('name', sa.String(length=100), nullable=False, comment='Group name'),
        sa.Column('description', sa.String(length=500), nullable=True, comment="Description of the group's purpose"),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('account_groups',
        sa.Column('account_id', sa.String(length=36), nullable=False, comment='Foreign key to accounts table'),
        sa.Column('group_id', sa.String(length=36), nullable=False, comment='Foreign key to study_groups table'),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['group_id'], ['study_groups.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('account_id', 'group_id')
    )
    with op.batch_alter_table('account_groups', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_account_groups_group_id'), ['group_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table('account_groups', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_account_groups_group_id'))

    op.drop_table('account_groups')
    op.drop_table('study_groups')

    with op.batch_alter_table('accounts', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_accounts_email'))

    op.drop_table('accounts')
