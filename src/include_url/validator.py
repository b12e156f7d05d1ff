"""
Structural validation of fetched payloads.

Checks that bytes are well-formed JSON before any typed parse is tried, so
"not JSON at all" and "JSON of the wrong shape" are reported separately.
"""

from __future__ import annotations

import orjson

from include_url.exceptions import ContentValidationError


def validate_structured(data: bytes) -> str:
    """Check that data is well-formed JSON.

    Args:
        data: Raw cached bytes.

    Returns:
        The content as text, unparsed. The typed parse is done later
        against the caller's target shape.

    Raises:
        ContentValidationError: If the bytes are not valid UTF-8 JSON.
    """
    try:
        orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise ContentValidationError(
            f"Invalid JSON content from URL: {e}", context={"cause": str(e)}
        ) from e
    # orjson has already rejected invalid UTF-8
    return data.decode("utf-8")
