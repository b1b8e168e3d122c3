# app/infrastructure/database/models.py

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.infrastructure.database.session import Base


class BaseModel(Base):
    __abstract__ = True

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class User(BaseModel):
    """Only the fields the event services consult. Accounts are managed elsewhere."""

    __tablename__ = "users"

    is_active = Column(Boolean, nullable=False, default=True)


class Event(BaseModel):
    """ORM model for scheduled events."""

    __tablename__ = "events"

    organizer_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    event_name = Column(String(200), nullable=False)
    event_description = Column(Text, nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=False, index=True)
    end_date = Column(DateTime(timezone=True), nullable=False, index=True)
    location = Column(String(300), nullable=True)
    timezone = Column(String(64), nullable=True)

    participants = relationship(
        "Participant",
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="Participant.created_at",
    )


class Participant(BaseModel):
    __tablename__ = "participants"

    event_id = Column(UUID(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)

    event = relationship("Event", back_populates="participants")
