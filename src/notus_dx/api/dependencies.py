"""FastAPI dependencies.

Everything a route needs lives on ``app.state`` and is set by
:func:`notus_dx.api.app.create_app`, so tests build an app with their own
settings and database instead of patching globals.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from notus_dx.config import Settings
from notus_dx.storage.database import Database
from notus_dx.webhooks.dispatcher import WebhookDispatcher


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_dispatcher(request: Request) -> WebhookDispatcher:
    return request.app.state.dispatcher


def get_database(request: Request) -> Optional[Database]:
    return request.app.state.database


async def require_admin_token(
    x_admin_token: str = Header(None),
    settings: Settings = Depends(get_app_settings),
) -> bool:
    """Verify admin token from header.

    If ADMIN_TOKEN is not set, allows access (dev mode).
    """
    if not settings.admin_token:
        return True

    if x_admin_token != settings.admin_token:
        raise HTTPException(status_code=401, detail="Invalid admin token")

    return True
