"""Initial schema — profiles and trips.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Profiles
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(100), unique=True, nullable=False),
        sa.Column("email", sa.String(320), unique=True, nullable=False),
        sa.Column("points", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_carbon_saved", sa.Float, nullable=False, server_default="0"),
        sa.Column(
            "created_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("idx_profiles_points", "profiles", ["points"])

    # Trips
    op.create_table(
        "trips",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.String(100),
            sa.ForeignKey("profiles.user_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("start_location", sa.Text, nullable=False),
        sa.Column("end_location", sa.Text, nullable=False),
        sa.Column("start_lat", sa.Float, nullable=False),
        sa.Column("start_lon", sa.Float, nullable=False),
        sa.Column("end_lat", sa.Float, nullable=False),
        sa.Column("end_lon", sa.Float, nullable=False),
        sa.Column("distance_km", sa.Float, nullable=False),
        sa.Column("points_earned", sa.Integer, nullable=False),
        sa.Column("carbon_saved", sa.Float, nullable=False),
        sa.Column("trees_equivalent", sa.Integer, nullable=False, server_default="0"),
        sa.Column("monetary_value", sa.Float, nullable=False, server_default="0"),
        sa.Column("image_path", sa.String(500), nullable=False),
        sa.Column(
            "created_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("idx_trips_user_created", "trips", ["user_id", "created_at"])


def downgrade() -> None:
    op.drop_index("idx_trips_user_created", table_name="trips")
    op.drop_table("trips")
    op.drop_index("idx_profiles_points", table_name="profiles")
    op.drop_table("profiles")
