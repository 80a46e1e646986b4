"""
pagelens/api/routers package marker.
"""

from pagelens.api.routers.analyze import router as analyze_router

__all__ = [
    "analyze_router",
]
