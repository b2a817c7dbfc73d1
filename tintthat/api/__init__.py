from tintthat.api.collections import router as collections_router
from tintthat.api.editor import router as editor_router
from tintthat.api.health import router as health_router

__all__ = [
    "collections_router",
    "editor_router",
    "health_router",
]
