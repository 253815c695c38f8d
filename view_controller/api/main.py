"""View Controller API.

Serves view definitions and drives view controllers over HTTP:
- View definitions (declarative view kinds)
- Controllers (create, render, render into, reset, destroy)
- The display tree controllers render into
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from view_controller import __version__, config
from view_controller.api.routes import controllers, document, views
from view_controller.controllers import store
from view_controller.paths import get_namespace
from view_controller.views.registry import get_view_registry

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Pre-load view definitions
    logger.info("Loading view definitions...")
    view_registry = get_view_registry()
    logger.info(f"Loaded {view_registry.count()} view definitions")

    namespace = get_namespace()
    logger.info(f"Namespace roots: {', '.join(namespace.roots())}")

    logger.info("View Controller API ready")
    yield
    # Shutdown
    logger.info("Shutting down View Controller API")
    store.clear_controllers()


# Create FastAPI app
app = FastAPI(
    title="View Controller API",
    description="""
## Managed view lifecycles

Each controller owns exactly one view: it is created with the controller,
rendered into a render target on request, reset on demand and destroyed
with the controller.

### Key Endpoints

- `GET /v1/views` - List view definitions
- `POST /v1/controllers` - Create a controller for a view
- `POST /v1/controllers/{id}/render` - Render the controller's view
- `POST /v1/controllers/{id}/reset` - Recreate the controller's view
- `GET /v1/document/html` - The rendered display tree
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(views.router, prefix="/v1")
app.include_router(controllers.router, prefix="/v1")
app.include_router(document.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "View Controller API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "views": "/v1/views",
            "controllers": "/v1/controllers",
            "document": "/v1/document",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "views_loaded": get_view_registry().count(),
        "controllers": len(store.list_controllers()),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "view_controller.api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
