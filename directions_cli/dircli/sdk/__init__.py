"""Typed Directions API response models and their JSON codecs."""

from dircli.sdk.codec import CODECS, DEFAULT_CODEC, ModelCodec, get_codec, to_json
from dircli.sdk.models import DirectionsResponse
from dircli.sdk.refresh import DirectionsRefreshResponse

__all__ = [
    "CODECS",
    "DEFAULT_CODEC",
    "DirectionsRefreshResponse",
    "DirectionsResponse",
    "ModelCodec",
    "get_codec",
    "to_json",
]
