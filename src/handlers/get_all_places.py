"""GET /all — list every travel place."""

from typing import Any

from core.clients import get_place_store
from core.config import get_config
from core.errors import TravelBucketError
from core.logging_config import setup_logging
from core.responses import error_response, json_response


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    setup_logging(get_config().log_level)
    try:
        places = get_place_store().get_all_places()
    except TravelBucketError as e:
        return error_response(e)
    return json_response(200, [place.model_dump(mode="json") for place in places])
