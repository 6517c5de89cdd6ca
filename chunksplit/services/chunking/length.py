"""Length accounting for chunking. Character count unless a length function is injected."""

import math
from numbers import Real

from chunksplit.config.chunking.models import LengthFunction
from chunksplit.config.logging import get_logger
from chunksplit.exceptions import LengthFunctionError

logger = get_logger(__name__)


def measure(text: str, length_function: LengthFunction | None = None) -> float:
    """Return the length of text under length_function, or its character count."""
    if length_function is None:
        return len(text)
    try:
        value = length_function(text)
    except Exception as e:
        logger.warning(
            "Length function failed",
            extra={"error_type": type(e).__name__, "fragment_length": len(text)},
        )
        raise LengthFunctionError(f"Length function failed on a {len(text)}-character fragment: {e}", cause=e) from e
    # bool is registered as a Real
    if isinstance(value, bool) or not isinstance(value, Real):
        raise LengthFunctionError(f"Length function returned {type(value).__name__}, expected a number")
    if math.isnan(value):
        raise LengthFunctionError("Length function returned NaN")
    if value < 0:
        raise LengthFunctionError(f"Length function returned a negative length: {value!r}")
    return value
