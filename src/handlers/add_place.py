"""POST /add — create a travel place."""

from typing import Any

from core.clients import get_place_store
from core.config import get_config
from core.errors import TravelBucketError
from core.logging_config import setup_logging
from core.responses import error_response, json_response, parse_place


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    setup_logging(get_config().log_level)
    try:
        place = parse_place(event)
        stored = get_place_store().add_place(place)
    except TravelBucketError as e:
        return error_response(e)
    return json_response(201, stored.model_dump(mode="json"))
