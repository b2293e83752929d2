import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import JSON, Date, DateTime, Numeric, String, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Trip(Base):
    """A planned journey with its generated itinerary and cost split.

    Rows are written once by the trip service and only ever read or deleted
    afterwards; the four cost columns duplicate the itinerary's budget
    breakdown so they can be queried directly.
    """

    __tablename__ = "trips"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    origin: Mapped[str] = mapped_column(String(100), nullable=False)
    destination: Mapped[str] = mapped_column(String(100), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    budget: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    itinerary: Mapped[dict] = mapped_column(JSONType, nullable=False)
    transport_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    stay_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    food_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    activities_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
