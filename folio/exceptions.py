"""Exceptions raised by the content build and the contact handler."""

from typing import List, Optional


class ContentError(Exception):
    """
    Raised when a content file cannot be compiled into a post.

    Attributes:
        message: Error description
        path: Content-relative path of the offending file
        fields: Front-matter fields that failed validation
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        fields: Optional[List[str]] = None,
    ):
        self.message = message
        self.path = path
        self.fields = fields or []

        parts = [message]
        if path:
            parts.append(f"File: {path}")
        if self.fields:
            parts.append(f"Fields: {', '.join(self.fields)}")

        super().__init__("\n".join(parts))


class ContactDeliveryError(Exception):
    """Raised when a contact message could not be handed to the delivery service."""
