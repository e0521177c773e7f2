"""
Sikkim Tourism Backend — Request Body Parsing
===============================================

What:  Dependency factory that reads a create payload from JSON or form data.
How:   Dispatches on Content-Type. Form bodies (urlencoded or multipart) are
       read with Starlette's `request.form()`; anything else is decoded as
       JSON. The resulting mapping is validated against the given Pydantic
       model.
Who:   The POST routes for destinations, bookings and contact messages.

Edge cases:
    - Empty body              → {} (all fields absent; the service reports
                                which required fields are missing)
    - Empty form values       → dropped, same as absent
    - Invalid JSON / non-object JSON / non-scalar text fields
                              → ValidationError("invalid request body") → 400
"""

import json
from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from sikkim.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> Dict[str, Any]:
    """Return the request body as a plain dict, whatever its encoding."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if value != ""}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError(message="invalid request body", context={"reason": str(e)})
    if not isinstance(data, dict):
        raise ValidationError(
            message="invalid request body",
            context={"reason": f"expected a JSON object, got {type(data).__name__}"},
        )
    return data


def parse_payload(model: Type[ModelT]) -> Callable[[Request], Any]:
    """
    Build a dependency that yields a validated `model` instance.

    Example:
        async def create_booking(payload: BookingCreate = Depends(parse_payload(BookingCreate))):
            ...
    """

    async def dependency(request: Request) -> ModelT:
        data = await read_body(request)
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ValidationError(message="invalid request body", fields=fields)

    return dependency
