"""
API layer for the asset tag scanner.

Exposes HTTP endpoints under /api/v1: auth, batch extraction (ocr), the live
tag feed (server-sent events) and tag management.
"""
from .auth_controller import router as auth_router
from .ocr_controller import router as ocr_router
from .live_controller import router as live_router
from .asset_tag_controller import router as asset_tag_router


__all__ = ["auth_router", "ocr_router", "live_router", "asset_tag_router"]
