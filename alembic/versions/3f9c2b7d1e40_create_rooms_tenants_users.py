"""create_rooms_tenants_users

Revision ID: 3f9c2b7d1e40
Revises:
Create Date: 2025-03-15 20:38:21.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2b7d1e40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the lodge schema.

    Creates:
    - rooms table (rent and lease period shared by the room's tenants)
    - tenants table referencing rooms (ON DELETE RESTRICT)
    - users table (reserved for authentication)
    """
    # 1. Rooms
    op.create_table(
        'rooms',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('rent_amount', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('period_from', sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column('period_to', sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint('id', name='rooms_pkey'),
        sa.UniqueConstraint('name', name='rooms_name_key'),
    )

    # 2. Tenants
    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('father_name', sa.String(length=255), nullable=False),
        sa.Column('village_name', sa.String(length=255), nullable=False),
        sa.Column('tehsil', sa.String(length=255), nullable=False),
        sa.Column('police_station', sa.String(length=255), nullable=False),
        sa.Column('district', sa.String(length=255), nullable=False),
        sa.Column('pincode', sa.String(length=6), nullable=False),
        sa.Column('state', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('aadhar_number', sa.String(length=12), nullable=False),
        sa.Column('phone_number', sa.String(length=10), nullable=False),
        sa.Column('father_phone_number', sa.String(length=10), nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.ForeignKeyConstraint(
            ['room_id'], ['rooms.id'],
            name='tenants_room_id_fkey', ondelete='RESTRICT', onupdate='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='tenants_pkey'),
        sa.UniqueConstraint('aadhar_number', name='tenants_aadhar_number_key'),
    )
    op.create_index('tenants_room_id_idx', 'tenants', ['room_id'])

    # 3. Users
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint('id', name='users_pkey'),
    )
    op.create_index('users_email_key', 'users', ['email'], unique=True)


def downgrade() -> None:
    """Drop the lodge schema (all room, tenant and user data is lost)."""
    op.drop_index('users_email_key', table_name='users')
    op.drop_table('users')
    op.drop_index('tenants_room_id_idx', table_name='tenants')
    op.drop_table('tenants')
    op.drop_table('rooms')
