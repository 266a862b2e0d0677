"""Like use cases."""

from .get_like_status import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
    LikeStatusItem,
)
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase

__all__ = [
    "GetLikeStatusRequest",
    "GetLikeStatusResponse",
    "GetLikeStatusUseCase",
    "LikeStatusItem",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
]
