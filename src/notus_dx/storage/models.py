"""SQLAlchemy models for the webhook event store."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class WebhookEventRecord(Base):
    """A verified webhook delivery.

    ``delivery_id`` is the Svix message id and is unique, so redelivered
    messages can be detected.
    """

    __tablename__ = "webhook_events"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    delivery_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    event_id: Mapped[str] = mapped_column(String(255), nullable=False)
    event_type: Mapped[str] = mapped_column(String(100), nullable=False)
    known: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    event_timestamp: Mapped[str] = mapped_column(String(64), nullable=False)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
    received_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    __table_args__ = (Index("ix_webhook_events_type_received", "event_type", "received_at"),)

    def __repr__(self) -> str:
        return f"<WebhookEventRecord {self.delivery_id} {self.event_type}>"
