"""KYC verification sessions and document uploads.

Flow:
1. create_session -> session plus pre-signed document upload targets
2. upload_document for the front (and back) of the document
3. finalize -> starts processing
4. wait_for_verification, or a ``kyc.completed`` webhook
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Union

import httpx

from notus_dx.actions.base import ActionGroup, Payload
from notus_dx.client.exceptions import DocumentUploadError
from notus_dx.client.http import NotusClient
from notus_dx.contracts.kyc import KYC_TERMINAL_STATUSES, DocumentUpload
from notus_dx.utils.polling import poll_until_terminal

logger = logging.getLogger(__name__)

SESSIONS_PATH = "/kyc/individual-verification-sessions/standard"
UPLOAD_TIMEOUT = 60.0


def session_status(data: Any) -> Optional[str]:
    """Status of a session response (``{"session": {"status": ...}}``)."""
    if not isinstance(data, dict):
        return None
    session = data.get("session", data)
    if isinstance(session, dict):
        return session.get("status")
    return None


class KYCActions(ActionGroup):
    """Individual verification sessions."""

    def __init__(
        self,
        client: NotusClient,
        poll_initial_delay: float = 2.0,
        poll_interval: float = 5.0,
        poll_timeout: Optional[float] = 600.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        upload_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(client)
        self.poll_initial_delay = poll_initial_delay
        self.poll_interval = poll_interval
        self.poll_timeout = poll_timeout
        self._sleep = sleep
        self._upload_transport = upload_transport

    async def create_session(self, params: Payload) -> Any:
        """POST /kyc/individual-verification-sessions/standard"""
        return await self._post(SESSIONS_PATH, params)

    async def get_session(self, session_id: str) -> Any:
        """GET /kyc/individual-verification-sessions/standard/{id}"""
        return await self._get(f"{SESSIONS_PATH}/{session_id}")

    async def finalize(self, session_id: str) -> Any:
        """Start processing once documents are uploaded.

        POST /kyc/individual-verification-sessions/standard/{id}/process
        """
        return await self._post(f"{SESSIONS_PATH}/{session_id}/process")

    async def upload_document(
        self,
        content: bytes,
        filename: str,
        upload: Union[DocumentUpload, dict],
        content_type: str = "application/octet-stream",
    ) -> None:
        """Upload a document image to its pre-signed storage URL.

        The storage service expects the signed form fields first and the
        file last. The Notus API key is not sent.

        Raises:
            DocumentUploadError: if storage rejects the upload
        """
        if isinstance(upload, dict):
            upload = DocumentUpload.model_validate(upload)

        async with httpx.AsyncClient(
            timeout=UPLOAD_TIMEOUT, transport=self._upload_transport
        ) as client:
            response = await client.post(
                upload.url,
                data=upload.fields,
                files={"file": (filename, content, content_type)},
            )

        if not response.is_success:
            logger.error(f"Document upload failed: HTTP {response.status_code}")
            raise DocumentUploadError(response.status_code, response.text)
        logger.info(f"Uploaded {filename} ({len(content)} bytes)")

    async def wait_for_verification(self, session_id: str) -> Any:
        """Poll the session until it is COMPLETED, FAILED or EXPIRED.

        Raises:
            PollTimeoutError: if no terminal state is reached within ``poll_timeout``
        """
        return await poll_until_terminal(
            lambda: self.get_session(session_id),
            session_status,
            KYC_TERMINAL_STATUSES,
            interval=self.poll_interval,
            timeout=self.poll_timeout,
            initial_delay=self.poll_initial_delay,
            sleep=self._sleep,
            description=f"KYC session {session_id}",
        )
