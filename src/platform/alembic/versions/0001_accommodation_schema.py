"""accommodation_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- events: minimal event catalogue referenced by bookings
- accommodations: properties offered to event attendees
- accommodation_rooms: bookable rooms, unique room_number per accommodation
- accommodation_bookings: room stays with a no-overlap exclusion constraint
- accommodation_payments: append-only payment ledger per booking
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create accommodation tables and the booking overlap guard."""

    # equality on room_id inside a gist exclusion constraint
    op.execute('CREATE EXTENSION IF NOT EXISTS btree_gist')

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'accommodations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('total_rooms', sa.Integer(), nullable=False),
        sa.Column('price_per_night', sa.Numeric(10, 2), nullable=False),
        sa.Column('amenities', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(length=512), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('total_rooms >= 1', name='ck_accommodations_total_rooms_positive'),
        sa.CheckConstraint('price_per_night > 0', name='ck_accommodations_price_positive'),
    )
    op.create_index(
        op.f('ix_accommodations_location'), 'accommodations', ['location'], unique=False
    )

    op.create_table(
        'accommodation_rooms',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('accommodation_id', sa.Integer(), nullable=False),
        sa.Column('room_number', sa.String(length=50), nullable=False),
        sa.Column('room_type', sa.String(length=20), nullable=False),
        sa.Column('capacity', sa.Integer(), server_default='1', nullable=False),
        sa.Column('is_available', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['accommodation_id'], ['accommodations.id'], ondelete='CASCADE'),
        sa.UniqueConstraint(
            'accommodation_id', 'room_number', name='uq_rooms_accommodation_number'
        ),
        sa.CheckConstraint(
            "room_type IN ('single', 'double', 'suite', 'dormitory')", name='ck_rooms_room_type'
        ),
        sa.CheckConstraint('capacity >= 1', name='ck_rooms_capacity_positive'),
    )
    op.create_index(
        op.f('ix_accommodation_rooms_accommodation_id'),
        'accommodation_rooms',
        ['accommodation_id'],
        unique=False,
    )

    op.create_table(
        'accommodation_bookings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('check_in_date', sa.Date(), nullable=False),
        sa.Column('check_out_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        sa.Column('total_price', sa.Numeric(10, 2), nullable=False),
        sa.Column(
            'payment_status', sa.String(length=20), server_default='pending', nullable=False
        ),
        sa.Column('payment_method', sa.String(length=20), nullable=True),
        sa.Column('special_requests', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['room_id'], ['accommodation_rooms.id'], ondelete='RESTRICT'),
        sa.CheckConstraint('check_out_date > check_in_date', name='ck_bookings_dates_ordered'),
        sa.CheckConstraint(
            "status IN ('pending', 'confirmed', 'checked_in', 'checked_out', 'cancelled')",
            name='ck_bookings_status',
        ),
        sa.CheckConstraint(
            "payment_status IN ('pending', 'partial', 'completed')",
            name='ck_bookings_payment_status',
        ),
    )
    op.create_index(
        op.f('ix_accommodation_bookings_user_id'), 'accommodation_bookings', ['user_id']
    )
    op.create_index(
        op.f('ix_accommodation_bookings_event_id'), 'accommodation_bookings', ['event_id']
    )
    op.create_index(
        'ix_bookings_room_dates',
        'accommodation_bookings',
        ['room_id', 'check_in_date', 'check_out_date'],
    )
    op.execute("""
        ALTER TABLE accommodation_bookings
        ADD CONSTRAINT ex_accommodation_bookings_no_overlap
        EXCLUDE USING gist (
            room_id WITH =,
            daterange(check_in_date, check_out_date, '[)') WITH &&
        )
        WHERE (status <> 'cancelled')
    """)

    op.create_table(
        'accommodation_payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('booking_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('payment_method', sa.String(length=20), nullable=False),
        sa.Column('reference_number', sa.String(length=100), nullable=True),
        sa.Column('receipt_url', sa.String(length=512), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['booking_id'], ['accommodation_bookings.id'], ondelete='RESTRICT'
        ),
        sa.CheckConstraint('amount > 0', name='ck_payments_amount_positive'),
        sa.CheckConstraint(
            "payment_method IN ('credit_card', 'bank_transfer', 'cash', 'other')",
            name='ck_payments_method',
        ),
    )
    op.create_index(
        op.f('ix_accommodation_payments_booking_id'), 'accommodation_payments', ['booking_id']
    )


def downgrade() -> None:
    """Drop accommodation tables (indexes and constraints go with them)."""
    op.drop_table('accommodation_payments')
    op.drop_table('accommodation_bookings')
    op.drop_table('accommodation_rooms')
    op.drop_table('accommodations')
    op.drop_table('events')
