import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from folio import dependencies as deps
from folio.exceptions import ContactDeliveryError
from folio.schemas.contact import ContactError, ContactRequest, ContactResponse
from folio.services.contact_service import ContactService

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ContactError(error=message).model_dump()
    )


def describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "body"
    if first["type"] == "missing":
        return f"Missing required field: {field}"
    return f"Invalid {field}: {first['msg']}"


@router.post(
    "/api/contact",
    response_model=ContactResponse,
    responses={400: {"model": ContactError}, 502: {"model": ContactError}},
)
async def submit_contact(
    request: Request,
    service: ContactService = Depends(deps.get_contact_service),
):
    """
    Forward a contact form submission to the delivery service.
    Errors come back as {"error": ...} so the form can show them as-is.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _error(400, "Invalid JSON body")

    if not isinstance(payload, dict):
        return _error(400, "Expected a JSON object with name, email and message")

    try:
        contact = ContactRequest.model_validate(payload)
    except ValidationError as e:
        return _error(400, describe_validation_error(e))

    try:
        await service.send(contact)
        return ContactResponse()
    except ContactDeliveryError:
        return _error(502, "Failed to send message")
    except Exception as e:
        logger.error(f"Unexpected error sending contact message: {e}")
        return _error(500, "Failed to send message. Please try again.")
