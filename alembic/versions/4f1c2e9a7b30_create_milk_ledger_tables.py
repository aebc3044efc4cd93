"""create users, milk_rates and milk_transactions

Revision ID: 4f1c2e9a7b30
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f1c2e9a7b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('mobile', sa.String(length=15), nullable=False),
        sa.Column('role', sa.String(length=16), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('mobile', name='uq_users_mobile'),
    )

    op.create_table(
        'milk_rates',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('milk_type', sa.String(length=16), nullable=False),
        sa.Column('delivery_session', sa.String(length=16), nullable=True),
        sa.Column('session_key', sa.String(length=16), nullable=False),
        sa.Column('price_per_unit', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('effective_from', sa.Date(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_milk_rates'),
        sa.UniqueConstraint(
            'milk_type', 'session_key', 'effective_from', name='ux_milk_rates_type_session_from'
        ),
    )
    op.create_index('ix_milk_rates_type_from', 'milk_rates', ['milk_type', 'effective_from'], unique=False)

    op.create_table(
        'milk_transactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('buyer_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('quantity', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('unit', sa.String(length=10), nullable=False, server_default='L'),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='delivered'),
        sa.Column('delivery_session', sa.String(length=16), nullable=False, server_default='morning'),
        sa.Column('milk_type', sa.String(length=16), nullable=False, server_default='cow'),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.Column('price_per_unit', sa.DECIMAL(10, 2), nullable=True),
        sa.Column('total_amount', sa.DECIMAL(12, 2), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_milk_transactions'),
        sa.ForeignKeyConstraint(
            ['seller_id'], ['users.id'], name='fk_milk_transactions_seller_id_users', ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['buyer_id'], ['users.id'], name='fk_milk_transactions_buyer_id_users', ondelete='CASCADE'
        ),
    )
    op.create_index('ix_milk_transactions_buyer_id', 'milk_transactions', ['buyer_id'], unique=False)
    op.create_index('ix_milk_transactions_date', 'milk_transactions', ['date'], unique=False)
    op.create_index(
        'ix_milk_transactions_seller_buyer_date',
        'milk_transactions',
        ['seller_id', 'buyer_id', 'date'],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index('ix_milk_transactions_seller_buyer_date', table_name='milk_transactions')
    op.drop_index('ix_milk_transactions_date', table_name='milk_transactions')
    op.drop_index('ix_milk_transactions_buyer_id', table_name='milk_transactions')
    op.drop_table('milk_transactions')
    op.drop_index('ix_milk_rates_type_from', table_name='milk_rates')
    op.drop_table('milk_rates')
    op.drop_table('users')
