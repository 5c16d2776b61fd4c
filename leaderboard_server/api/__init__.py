from .routes import router
from .static import static_router

__all__ = ["router", "static_router"]
