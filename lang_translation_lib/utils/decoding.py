"""
Response decoding: turn a :class:`RawResponse` into a typed model or an error.

Decoding is a single, pure transform of one response:

* non‑2xx responses become :class:`ServiceError` (or one of its subclasses),
  with the message taken from the JSON error body when one is recognisable,
* 2xx bodies are parsed as JSON and validated against a pydantic model;
  anything that does not fit raises :class:`DecodeError`.
"""

import json
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from lang_translation_lib.data_models.api_request import RawResponse
from lang_translation_lib.data_models.constants import ERROR_MESSAGE_KEYS
from lang_translation_lib.exceptions import (
    AuthenticationError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    ServiceError,
)

T = TypeVar("T", bound=BaseModel)

_STATUS_ERRORS: Dict[int, Type[ServiceError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    429: RateLimitError,
}


def extract_error_message(resp: RawResponse) -> str:
    """
    Pick a human readable message out of an error response.

    The first string found under one of ``ERROR_MESSAGE_KEYS`` wins; an
    ``{"error": {"message": ...}}`` shape is also understood.  When the body
    is not a JSON object or holds none of those keys, the raw body text is
    returned.
    """
    try:
        payload = json.loads(resp.body) if resp.body else None
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        for key in ERROR_MESSAGE_KEYS:
            value = payload.get(key)
            if isinstance(value, dict):
                value = value.get("message")
            if isinstance(value, str) and value:
                return value
    return resp.text


def raise_for_status(resp: RawResponse) -> RawResponse:
    """
    Translate HTTP error codes into library‑specific exceptions.

    Raises
    ------
    AuthenticationError
        When the server returns ``401`` or ``403``.
    NotFoundError
        When the server returns ``404``.
    RateLimitError
        When the server returns ``429``.
    ServiceError
        For any other non‑2xx status code.
    """
    if resp.is_success:
        return resp
    error_cls = _STATUS_ERRORS.get(resp.status_code, ServiceError)
    raise error_cls(resp.status_code, extract_error_message(resp))


def decode_json(resp: RawResponse) -> Any:
    raise_for_status(resp)
    try:
        return json.loads(resp.body)
    except ValueError as exc:
        raise DecodeError(f"Invalid response format: {exc}") from exc


def decode_object(resp: RawResponse, model_cls: Type[T]) -> T:
    """Decode a JSON object body into ``model_cls``."""
    payload = decode_json(resp)
    try:
        return model_cls.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Response does not match {model_cls.__name__}: {exc}"
        ) from exc


def decode_list(
    resp: RawResponse, item_cls: Type[T], envelope_key: Optional[str] = None
) -> List[T]:
    """
    Decode a list of ``item_cls`` items.

    The body may be a bare JSON array or an object wrapping the array under
    ``envelope_key``.  Item order is preserved.
    """
    payload = decode_json(resp)
    if envelope_key and isinstance(payload, dict):
        if envelope_key not in payload:
            raise DecodeError(f"Response is missing the '{envelope_key}' field")
        payload = payload[envelope_key]
    try:
        return TypeAdapter(List[item_cls]).validate_python(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Response does not match List[{item_cls.__name__}]: {exc}"
        ) from exc
