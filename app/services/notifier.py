from __future__ import annotations

import html
import logging
from typing import Mapping, Optional, Protocol

import httpx

from app.core.config import settings
from app.core.exceptions import NotificationError

log = logging.getLogger(__name__)

CRISIS_SUBJECT = "Important Resources - NariCare Support"


class CrisisNotifier(Protocol):
    def send_crisis_email(self, to_email: str, first_name: Optional[str], resources: Mapping[str, str]) -> None:
        ...


def crisis_text_body(first_name: str, resources: Mapping[str, str]) -> str:
    return (
        f"Hi {first_name}, we noticed you might be going through a difficult time. "
        "Please know that you're not alone and help is available.\n\n"
        f"Crisis Hotline: {resources['crisisHotline']}\n"
        f"Emergency: {resources['emergency']}\n"
        f"Crisis Text Line: text HOME to {resources['textLine']}\n"
        f"Maternal Mental Health Hotline: {resources['maternalHotline']}\n"
        f"Find local resources at: {resources['localResources']}\n"
    )


def crisis_html_body(first_name: str, resources: Mapping[str, str]) -> str:
    name = html.escape(first_name)
    r = {k: html.escape(v) for k, v in resources.items()}
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        "<title>You Are Not Alone - Support Resources</title></head><body>"
        "<h1>You Are Not Alone</h1>"
        f"<h2>Dear {name},</h2>"
        "<p>We noticed you might be going through a difficult time. Please know that what "
        "you're feeling is valid, and reaching out for help is a sign of incredible strength.</p>"
        "<h3>Immediate Help Available:</h3>"
        f"<p><strong>Crisis Hotline:</strong> <a href=\"tel:{r['crisisHotline']}\">{r['crisisHotline']}</a></p>"
        f"<p><strong>Emergency Services:</strong> <a href=\"tel:{r['emergency']}\">{r['emergency']}</a></p>"
        "<p><em>Available 24/7 - You don't have to face this alone</em></p>"
        "<h3>Additional Support Resources:</h3>"
        f"<p><strong>Crisis Text Line:</strong> text HOME to {r['textLine']}</p>"
        f"<p><strong>National Maternal Mental Health Hotline:</strong> {r['maternalHotline']}</p>"
        f"<p><a href=\"{r['localResources']}\">Find local postpartum support</a></p>"
        "</body></html>"
    )


class SendGridNotifier:
    """
    Sends crisis emails through the SendGrid v3 mail/send endpoint.
    Every failure is raised as NotificationError; there are no retries.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        from_email: Optional[str] = None,
        from_name: Optional[str] = None,
        api_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.SENDGRID_API_KEY
        self.from_email = from_email or settings.SENDGRID_FROM_EMAIL
        self.from_name = from_name or settings.SENDGRID_FROM_NAME
        self.api_url = api_url or settings.SENDGRID_API_URL
        self._client = client

    def build_message(self, to_email: str, first_name: Optional[str], resources: Mapping[str, str]) -> dict:
        name = first_name or "there"
        return {
            "personalizations": [{"to": [{"email": to_email}]}],
            "from": {"email": self.from_email, "name": self.from_name},
            "subject": CRISIS_SUBJECT,
            # SendGrid requires text/plain before text/html
            "content": [
                {"type": "text/plain", "value": crisis_text_body(name, resources)},
                {"type": "text/html", "value": crisis_html_body(name, resources)},
            ],
        }

    def send_crisis_email(self, to_email: str, first_name: Optional[str], resources: Mapping[str, str]) -> None:
        if not self.api_key:
            raise NotificationError("SendGrid API key is not configured")

        headers = {"Authorization": f"Bearer {self.api_key}"}
        message = self.build_message(to_email, first_name, resources)
        try:
            if self._client is not None:
                r = self._client.post(self.api_url, json=message, headers=headers)
            else:
                timeout = httpx.Timeout(settings.SENDGRID_TIMEOUT_SECONDS)
                with httpx.Client(timeout=timeout) as client:
                    r = client.post(self.api_url, json=message, headers=headers)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            log.warning("SendGrid HTTP error: %s", e.response.status_code)
            raise NotificationError(f"SendGrid rejected crisis email ({e.response.status_code})") from e
        except httpx.RequestError as e:
            log.warning("SendGrid request error: %s: %s", type(e).__name__, e)
            raise NotificationError("Failed to send crisis intervention email") from e
        except (httpx.InvalidURL, ValueError) as e:
            # bad SENDGRID_API_URL or an API key that cannot go in a header
            log.warning("SendGrid request could not be built: %s: %s", type(e).__name__, e)
            raise NotificationError("Crisis email request could not be built") from e

        log.info("Crisis intervention email sent to %s", to_email)
