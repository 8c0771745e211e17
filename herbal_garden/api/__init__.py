# herbal_garden/api/__init__.py
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from herbal_garden.api.errors import register_error_handlers
from herbal_garden.api.routers import contacts, health, orders, products
from herbal_garden.utils.settings import STATIC_DIR


def create_app(lifespan=None, static_dir: str | None = STATIC_DIR) -> FastAPI:
    app = FastAPI(title="Herbal Garden Storefront", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(contacts.router)
    app.include_router(orders.router)

    if static_dir:
        mount_frontend(app, static_dir)

    return app


def mount_frontend(app: FastAPI, static_dir: str) -> None:
    """Statyczny frontend + fallback na index.html dla nieznanych tras (SPA)."""
    root = os.path.abspath(static_dir)
    index = os.path.join(root, "index.html")

    @app.get("/{path:path}", include_in_schema=False)
    def frontend(path: str):
        candidate = os.path.abspath(os.path.join(root, path))
        if path and candidate.startswith(root + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)
        return FileResponse(index)
