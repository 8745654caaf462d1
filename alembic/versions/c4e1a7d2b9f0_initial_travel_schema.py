"""initial_travel_schema

Revision ID: c4e1a7d2b9f0
Revises:
Create Date: 2026-10-18 09:00:00.000000

여행 예약 스키마 생성: destinations, trips, guides, trip_guides, users,
trip_registrations, logs.
Create the travel booking schema.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = 'c4e1a7d2b9f0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # destinations: 여행지 (Places trips go to)
    op.create_table(
        'destinations',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.String(500), nullable=True),
        sa.Column('country', sa.String(100), nullable=False),
        sa.Column('city', sa.String(100), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # trips: 여행 (RESTRICT: 여행이 있는 여행지는 삭제 불가)
    op.create_table(
        'trips',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('destination_id', UUID(as_uuid=True), sa.ForeignKey('destinations.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.String(500), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('max_participants', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint('price > 0', name='ck_trip_price_positive'),
        sa.CheckConstraint('max_participants > 0', name='ck_trip_capacity_positive'),
        sa.CheckConstraint('end_date >= start_date', name='ck_trip_dates_ordered'),
    )
    op.create_index('ix_trips_destination', 'trips', ['destination_id'])

    # guides: 가이드
    op.create_table(
        'guides',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('bio', sa.String(500), nullable=True),
        sa.Column('email', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('years_of_experience', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # trip_guides: 여행-가이드 연결 (CASCADE both sides)
    op.create_table(
        'trip_guides',
        sa.Column('trip_id', UUID(as_uuid=True), sa.ForeignKey('trips.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('guide_id', UUID(as_uuid=True), sa.ForeignKey('guides.id', ondelete='CASCADE'), primary_key=True),
    )

    # users: 사용자 계정
    op.create_table(
        'users',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False, unique=True),
        sa.Column('email', sa.String(100), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(500), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('phone_number', sa.String(20), nullable=True),
        sa.Column('address', sa.String(200), nullable=True),
        sa.Column('is_admin', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # trip_registrations: 여행 예약 (RESTRICT to users and trips)
    op.create_table(
        'trip_registrations',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('trip_id', UUID(as_uuid=True), sa.ForeignKey('trips.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('registration_date', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('number_of_participants', sa.Integer(), nullable=False),
        sa.Column('total_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.String(20), server_default='Pending', nullable=False),
        sa.CheckConstraint('number_of_participants > 0', name='ck_registration_participants_positive'),
        sa.CheckConstraint('total_price > 0', name='ck_registration_total_positive'),
    )
    op.create_index('ix_trip_registrations_user', 'trip_registrations', ['user_id'])
    op.create_index('ix_trip_registrations_trip', 'trip_registrations', ['trip_id'])

    # logs: 감사 로그
    op.create_table(
        'logs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('level', sa.String(50), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
    )
    op.create_index('ix_logs_timestamp', 'logs', ['timestamp'])


def downgrade() -> None:
    op.drop_index('ix_logs_timestamp', table_name='logs')
    op.drop_table('logs')
    op.drop_index('ix_trip_registrations_trip', table_name='trip_registrations')
    op.drop_index('ix_trip_registrations_user', table_name='trip_registrations')
    op.drop_table('trip_registrations')
    op.drop_table('users')
    op.drop_table('trip_guides')
    op.drop_table('guides')
    op.drop_index('ix_trips_destination', table_name='trips')
    op.drop_table('trips')
    op.drop_table('destinations')
