"""Contracts for managing webhook subscriptions on the Notus API."""

from typing import Optional

from pydantic import Field

from notus_dx.contracts.base import ApiModel


class CreateWebhookParams(ApiModel):
    url: str
    events: list[str] = Field(default_factory=list)
    secret: Optional[str] = None


class UpdateWebhookParams(ApiModel):
    url: Optional[str] = None
    events: Optional[list[str]] = None
    secret: Optional[str] = None
