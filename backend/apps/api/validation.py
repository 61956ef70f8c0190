import re
from typing import Any, Dict, Optional

from django.conf import settings
from django.http import HttpRequest

from apps.api.exceptions import InvalidArgument
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="validation")

CART_HEADER = "HTTP_X_CART_ID"

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")

# Largest value the integer id/quantity columns hold (PostgreSQL ``integer``).
MAX_DB_INT = 2147483647


def parse_int(
    value: Any,
    field: str,
    *,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """
    Coerce a path segment or JSON value to ``int``.

    Accepts ints, integral floats and digit strings; rejects booleans, blanks
    and anything fractional. Values outside ``minimum``/``maximum`` are
    rejected too. Raises ``InvalidArgument`` naming ``field``.
    """

    parsed: Optional[int] = None
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, float) and value.is_integer():
        parsed = int(value)
    elif isinstance(value, str) and _INT_PATTERN.match(value):
        parsed = int(value)
    if parsed is None:
        raise InvalidArgument(f"Invalid {field}", details={field: str(value)})
    if minimum is not None and parsed < minimum:
        raise InvalidArgument(
            f"Invalid {field}",
            details={field: str(value), "minimum": minimum},
        )
    if maximum is not None and parsed > maximum:
        raise InvalidArgument(
            f"Invalid {field}",
            details={field: str(value), "maximum": maximum},
        )
    return parsed


def parse_id(value: Any, field: str) -> int:
    """Row or cart identifier: a positive integer that fits the column."""
    return parse_int(value, field, minimum=1, maximum=MAX_DB_INT)


def resolve_cart_id(request: HttpRequest) -> int:
    """Cart addressed by the request: ``X-Cart-Id`` header, else the configured default."""
    meta = getattr(request, "META", {}) or {}
    raw = meta.get(CART_HEADER)
    if raw is None or raw == "":
        return int(settings.CART_DEFAULT_ID)
    return parse_id(raw, "X-Cart-Id")


def cart_id_for(request) -> int:
    cart_id = getattr(request, "cart_id", None)
    if cart_id is None:
        cart_id = resolve_cart_id(request)
        request.cart_id = cart_id
    return cart_id


def validate_request_context(
    request: HttpRequest, view_class, view_kwargs: Dict[str, Any]
):
    """
    Run request-level checks ahead of the view.

    Views flagged with ``uses_cart = True`` get ``request.cart_id`` resolved
    here so an invalid header is rejected before any storage access. Returns
    an error response to short-circuit the request, or ``None``.
    """

    if not getattr(view_class, "uses_cart", False):
        return None
    try:
        request.cart_id = resolve_cart_id(request)
    except InvalidArgument as exc:
        logger.info(
            "Rejected request with invalid cart header",
            view=getattr(view_class, "__name__", str(view_class)),
            header=(getattr(request, "META", {}) or {}).get(CART_HEADER),
        )
        return exc.to_response()
    logger.debug("Resolved cart for request", cart_id=request.cart_id)
    return None
