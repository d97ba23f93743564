r"""
Compact JSON encoding for use inside templates.

Templates cannot handle exceptions, so encoding failures produce an empty
string instead of aborting the render.

    {{ jsonify(status_code_dist) }}
"""

import dataclasses
import json
import logging
from typing import Any

__all__ = ["jsonify"]

logger = logging.getLogger(__name__)


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def jsonify(value: Any) -> str:
    """Encode ``value`` as compact JSON, or return "" if it cannot be encoded."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=_default)
    except (TypeError, ValueError) as e:
        logger.warning("Could not encode %s as JSON: %s", type(value).__name__, e)
        return ""
