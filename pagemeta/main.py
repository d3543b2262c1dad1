from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pagemeta.core.config import settings
from pagemeta.exceptions.handlers import register_exception_handlers
from pagemeta.routers import router, root_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Page Metadata Server",
        description="Open-Graph style preview metadata for arbitrary pages",
        version="1.0.0",
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    app.include_router(root_router, tags=["root"])
    # Include the centralized router
    app.include_router(router, prefix="/api")
    return app


app = create_app()
