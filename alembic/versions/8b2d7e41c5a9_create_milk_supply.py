"""create milk_supply

Revision ID: 8b2d7e41c5a9
Revises: 4f1c2e9a7b30
Create Date: 2026-10-19 12:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8b2d7e41c5a9'
down_revision = '4f1c2e9a7b30'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'milk_supply',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('seller_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('quantity', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('unit', sa.String(length=10), nullable=False, server_default='L'),
        sa.Column('delivery_session', sa.String(length=16), nullable=False, server_default='morning'),
        sa.Column('milk_type', sa.String(length=16), nullable=False, server_default='cow'),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_milk_supply'),
        sa.ForeignKeyConstraint(
            ['seller_id'], ['users.id'], name='fk_milk_supply_seller_id_users', ondelete='CASCADE'
        ),
    )
    op.create_index('ix_milk_supply_seller_date', 'milk_supply', ['seller_id', 'date'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_milk_supply_seller_date', table_name='milk_supply')
    op.drop_table('milk_supply')
