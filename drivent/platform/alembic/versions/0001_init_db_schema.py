"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Schema:
- user / session: accounts and issued sign-in tokens
- event: the single hosted event
- enrollment / address: personal data, one address per enrollment
- ticket_type / ticket / payment: purchase flow
- hotel / room / booking: lodging
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
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    """Create all tables."""

    # ========== Accounts ==========
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'session',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('token', sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_session_user_id'), 'session', ['user_id'])
    op.create_index(op.f('ix_session_token'), 'session', ['token'])

    # ========== Event & enrollment ==========
    op.create_table(
        'event',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('background_image_url', sa.String(length=2048), nullable=False),
        sa.Column('logo_image_url', sa.String(length=2048), nullable=False),
        sa.Column('starts_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('ends_at', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'enrollment',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('cpf', sa.String(length=11), nullable=False),
        sa.Column('birthday', sa.DateTime(timezone=True), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )

    op.create_table(
        'address',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cep', sa.String(length=9), nullable=False),
        sa.Column('street', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('state', sa.String(length=2), nullable=False),
        sa.Column('number', sa.String(length=20), nullable=False),
        sa.Column('neighborhood', sa.String(length=255), nullable=False),
        sa.Column('address_detail', sa.String(length=255), nullable=True),
        sa.Column('enrollment_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['enrollment_id'], ['enrollment.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('enrollment_id'),
    )

    # ========== Tickets & payments ==========
    op.create_table(
        'ticket_type',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('is_remote', sa.Boolean(), nullable=False),
        sa.Column('includes_hotel', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'ticket',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('ticket_type_id', sa.Integer(), nullable=False),
        sa.Column('enrollment_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['ticket_type_id'], ['ticket_type.id']),
        sa.ForeignKeyConstraint(['enrollment_id'], ['enrollment.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_ticket_ticket_type_id'), 'ticket', ['ticket_type_id'])
    op.create_index(op.f('ix_ticket_enrollment_id'), 'ticket', ['enrollment_id'])

    op.create_table(
        'payment',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('ticket_id', sa.Integer(), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('card_issuer', sa.String(length=255), nullable=False),
        sa.Column('card_last_digits', sa.String(length=4), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['ticket_id'], ['ticket.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_payment_ticket_id'), 'payment', ['ticket_id'])

    # ========== Lodging ==========
    op.create_table(
        'hotel',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'room',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('hotel_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['hotel_id'], ['hotel.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_room_hotel_id'), 'room', ['hotel_id'])

    op.create_table(
        'booking',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['room_id'], ['room.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_booking_user_id'), 'booking', ['user_id'])
    op.create_index(op.f('ix_booking_room_id'), 'booking', ['room_id'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    for table in (
        'booking',
        'room',
        'hotel',
        'payment',
        'ticket',
        'ticket_type',
        'address',
        'enrollment',
        'event',
        'session',
        'user',
    ):
        op.drop_table(table)
