from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

import httpx
from pydantic import SecretStr

from nts.domain.subscriber_email import SubscriberEmail


class EmailClientError(Exception):
    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class EmailClient:
    """
    Thin HTTP client for a Postmark-style transactional email API.

    Construction performs no I/O and never fails; errors surface from
    ``send_email``.
    """

    def __init__(
        self,
        base_url: str,
        sender: SubscriberEmail,
        authorization_token: SecretStr,
        timeout: timedelta,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.sender = sender
        self.timeout = timeout
        self._authorization_token = authorization_token
        self._client = client or httpx.AsyncClient(timeout=timeout.total_seconds())
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Postmark-Server-Token": self._authorization_token.get_secret_value(),
        }

    async def send_email(
        self,
        recipient: SubscriberEmail,
        subject: str,
        html_content: str,
        text_content: str,
    ) -> None:
        payload = {
            "From": str(self.sender),
            "To": str(recipient),
            "Subject": subject,
            "HtmlBody": html_content,
            "TextBody": text_content,
        }
        try:
            self._logger.debug("EmailClient.send_email: POST %s/email to=%s", self.base_url, recipient)
            r = await self._client.post(
                f"{self.base_url}/email",
                headers=self._headers(),
                json=payload,
                timeout=self.timeout.total_seconds(),
            )
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise EmailClientError(
                f"Email API rejected the request: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise EmailClientError(f"Email API request failed: {e}") from e

    async def aclose(self) -> None:
        await self._client.aclose()
