import logging
from typing import Any, Dict

import httpx

from folio.exceptions import ContactDeliveryError
from folio.schemas.contact import ContactRequest
from folio.settings import Settings, settings

logger = logging.getLogger(__name__)


class ContactService:
    """Hands contact form messages to the e-mail delivery webhook."""

    def __init__(self, client: httpx.AsyncClient, settings_obj: Settings = settings):
        self.client = client
        self.settings = settings_obj

    async def send(self, request: ContactRequest) -> None:
        url = self.settings.CONTACT_WEBHOOK_URL
        if not url:
            raise ContactDeliveryError("CONTACT_WEBHOOK_URL is not configured")

        headers = {}
        if self.settings.CONTACT_API_KEY:
            headers["Authorization"] = f"Bearer {self.settings.CONTACT_API_KEY}"

        try:
            response = await self.client.post(
                url, json=build_email_payload(request, self.settings), headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Contact delivery failed for {request.email}: {e}")
            raise ContactDeliveryError(str(e)) from e

        logger.info(f"Delivered contact message from {request.email}")


def build_email_payload(request: ContactRequest, settings_obj: Settings) -> Dict[str, Any]:
    recipient = settings_obj.CONTACT_TO_EMAIL or settings_obj.CONTACT_FROM_EMAIL
    return {
        "from": settings_obj.CONTACT_FROM_EMAIL,
        "to": [recipient],
        "reply_to": request.email,
        "subject": f"New contact from {request.name}",
        "text": f"Name: {request.name}\nEmail: {request.email}\n\n{request.message}",
    }
