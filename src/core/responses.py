"""API Gateway proxy request parsing and response building."""

import json
from typing import Any

import pydantic

from core.errors import ErrorCode, TravelBucketError, ValidationError
from core.models.place import TravelPlace

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.PLACE_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.STORAGE_FAILED: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(error: TravelBucketError) -> dict[str, Any]:
    """Client-facing error; the internal message is never included."""
    return json_response(
        _STATUS_BY_CODE.get(error.code, 500),
        {"error": {"code": error.code.value, "message": error.user_message}},
    )


def parse_place(event: dict[str, Any]) -> TravelPlace:
    raw = event.get("body") or ""
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Request body is not JSON: {e}", code=ErrorCode.INVALID_REQUEST) from e
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object", code=ErrorCode.INVALID_REQUEST)
    try:
        return TravelPlace.model_validate(body)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid travel place: {e}", code=ErrorCode.VALIDATION_ERROR) from e


def parse_place_id(event: dict[str, Any]) -> int:
    path_params = event.get("pathParameters")
    if not isinstance(path_params, dict):
        raise ValidationError("Missing travel place id", code=ErrorCode.INVALID_REQUEST)
    try:
        return int(path_params["id"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid travel place id: {path_params.get('id')!r}", code=ErrorCode.INVALID_REQUEST) from e
