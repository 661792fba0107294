"""Webhook event store."""

from notus_dx.storage.database import Database
from notus_dx.storage.models import Base, WebhookEventRecord
from notus_dx.storage.repository import WebhookEventRepository

__all__ = ["Base", "Database", "WebhookEventRecord", "WebhookEventRepository"]
