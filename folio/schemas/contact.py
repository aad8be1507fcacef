import re
from typing import Annotated

from pydantic import BaseModel, StringConstraints, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ContactRequest(BaseModel):
    name: NonEmptyStr
    email: NonEmptyStr
    message: NonEmptyStr

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("value is not a valid email address")
        return value

    # {
    #   "name": "Ada",
    #   "email": "ada@example.com",
    #   "message": "I have a project in mind..."
    # }


class ContactResponse(BaseModel):
    success: bool = True
    message: str = "Message sent"


class ContactError(BaseModel):
    error: str
