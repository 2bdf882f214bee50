"""SQLAlchemy model for the activity table."""

from sqlalchemy import Column, DateTime, Float, Integer, String, Text

from app.infrastructure.database import Base


class ActivityModel(Base):
    """Database representation of an activity."""

    __tablename__ = "activity"

    id = Column(String(36), primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    date = Column(DateTime, nullable=False)
    # Offset in minutes of the submitted date; NULL when it was naive.
    date_utc_offset = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=False, default="")
    city = Column(String(100), nullable=False, default="")
    venue = Column(String(100), nullable=False, default="")
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)


__all__ = ["ActivityModel"]
