"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from datetime import datetime

from sqlalchemy import (
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.adapters.persistence.database import Base


class ProfileModel(Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_carbon_saved: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    trips: Mapped[list["TripModel"]] = relationship(back_populates="profile")

    __table_args__ = (Index("idx_profiles_points", "points"),)


class TripModel(Base):
    __tablename__ = "trips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(100), ForeignKey("profiles.user_id", ondelete="CASCADE"), nullable=False
    )
    start_location: Mapped[str] = mapped_column(Text, nullable=False)
    end_location: Mapped[str] = mapped_column(Text, nullable=False)
    start_lat: Mapped[float] = mapped_column(Float, nullable=False)
    start_lon: Mapped[float] = mapped_column(Float, nullable=False)
    end_lat: Mapped[float] = mapped_column(Float, nullable=False)
    end_lon: Mapped[float] = mapped_column(Float, nullable=False)
    distance_km: Mapped[float] = mapped_column(Float, nullable=False)
    points_earned: Mapped[int] = mapped_column(Integer, nullable=False)
    carbon_saved: Mapped[float] = mapped_column(Float, nullable=False)
    trees_equivalent: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    monetary_value: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    image_path: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    profile: Mapped["ProfileModel"] = relationship(back_populates="trips")

    __table_args__ = (Index("idx_trips_user_created", "user_id", "created_at"),)
