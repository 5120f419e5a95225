"""Decode/encode entry points for the Directions response models."""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel

from dircli.sdk.models import DirectionsResponse
from dircli.sdk.refresh import DirectionsRefreshResponse


def to_json(model: BaseModel) -> bytes:
    """Serialize a model the way the API writes it: compact, aliased, no nulls."""
    return model.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


def directions_from_json(payload: bytes) -> DirectionsResponse:
    """Parse a Directions response and stamp route indices and request uuid."""
    return DirectionsResponse.model_validate_json(payload).with_route_indices()


def refresh_from_json(payload: bytes) -> DirectionsRefreshResponse:
    return DirectionsRefreshResponse.model_validate_json(payload)


class ModelCodec:
    """A named decode/encode pair the round-trip validator runs against."""

    def __init__(
        self,
        name: str,
        decode: Callable[[bytes], BaseModel],
        encode: Callable[[BaseModel], bytes] = to_json,
    ) -> None:
        self.name = name
        self.decode = decode
        self.encode = encode

    def __repr__(self) -> str:
        return f"ModelCodec({self.name!r})"


CODECS: dict[str, ModelCodec] = {
    "directions": ModelCodec("directions", directions_from_json),
    "directions-refresh": ModelCodec("directions-refresh", refresh_from_json),
}

DEFAULT_CODEC = "directions"


def get_codec(name: str = DEFAULT_CODEC) -> ModelCodec:
    """Look up a codec by name. Raises KeyError with the known names."""
    try:
        return CODECS[name]
    except KeyError:
        raise KeyError(
            f"Unknown model '{name}' (choose from {', '.join(CODECS)})"
        ) from None
