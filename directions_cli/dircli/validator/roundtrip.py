"""Round-trip check: decode a payload, re-encode it, compare bytes."""

from __future__ import annotations

import logging

from dircli.sdk.codec import ModelCodec
from dircli.validator.models import ValidationInput, ValidationResult

logger = logging.getLogger(__name__)


def _describe(e: Exception) -> str:
    message = str(e).strip()
    return message or type(e).__name__


def validate_payload(
    source: ValidationInput,
    payload: bytes,
    codec: ModelCodec,
) -> ValidationResult:
    """Run one payload through ``codec`` and report the outcome.

    Decode and encode failures are captured in the result, never raised.
    The comparison is byte-exact: whitespace, key order and number
    formatting differences all count as a mismatch.
    """
    try:
        model = codec.decode(payload)
    except Exception as e:
        logger.debug("Decode failed for %s: %s", source, e)
        return ValidationResult.failed(source, _describe(e))

    try:
        encoded = codec.encode(model)
    except Exception as e:
        logger.debug("Encode failed for %s: %s", source, e)
        return ValidationResult.failed(source, _describe(e))

    converts_back = encoded == payload
    if not converts_back:
        logger.debug("Round trip mismatch for %s", source)
    return ValidationResult.passed(source, converts_back)
