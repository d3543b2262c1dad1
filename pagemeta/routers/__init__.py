from .router import router
from .root_routes import router as root_router

__all__ = ["router", "root_router"]
