from sqlalchemy import String, DateTime, Date, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, date, timezone
from raeesa_tours.db.session import Base

class Registration(Base):
    __tablename__ = "registrations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)

    first_name: Mapped[str] = mapped_column(String(120))
    last_name: Mapped[str] = mapped_column(String(120))
    email: Mapped[str] = mapped_column(String(320), index=True)
    phone: Mapped[str] = mapped_column(String(40))

    destination: Mapped[str] = mapped_column(String(120), index=True)
    departure_date: Mapped[str] = mapped_column(String(10))  # DD/MM/YYYY as entered
    return_date: Mapped[str] = mapped_column(String(10))
    # parsed departure_date, used by the admin date range filter
    departure_on: Mapped[date] = mapped_column(Date, nullable=True, index=True)

    adults: Mapped[str] = mapped_column(String(4), default="1")
    children: Mapped[str] = mapped_column(String(4), default="0")
    room_type: Mapped[str] = mapped_column(String(20), default="standard")  # standard, deluxe, suite, houseboat
    meal_preference: Mapped[str] = mapped_column(String(20), default="vegetarian")  # vegetarian, nonVegetarian, vegan, halal
    special_requests: Mapped[str] = mapped_column(Text, default="")

    emergency_name: Mapped[str] = mapped_column(String(200))
    emergency_phone: Mapped[str] = mapped_column(String(40))
    emergency_relation: Mapped[str] = mapped_column(String(80))

    street_address: Mapped[str] = mapped_column(String(255))
    city: Mapped[str] = mapped_column(String(120))
    state_province: Mapped[str] = mapped_column(String(120))
    postal_code: Mapped[str] = mapped_column(String(20))
    country: Mapped[str] = mapped_column(String(120))

    terms_accepted: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
