# src/tabledrag_tree/api/app.py
import importlib
from pathlib import Path

from fastapi import FastAPI, Request

from tabledrag_tree import __version__
from tabledrag_tree.config import settings
from tabledrag_tree.db.init_db import init_db
from tabledrag_tree.db.session import engine
from tabledrag_tree.utils.logger import log_info

app = FastAPI(
    title=settings.app_name,
    description="API for reading and reordering a weighted parent/child item table",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
)


@app.on_event("startup")
async def startup_event():
    """Executes when FastAPI starts, making sure the items table exists."""
    log_info("🚀 FastAPI startup initiated...")
    init_db(engine)


# ✅ Middleware for logging requests
@app.middleware("http")
async def log_requests(request: Request, call_next):
    log_info(f"📥 Incoming request: {request.method} {request.url}")
    response = await call_next(request)
    log_info(f"📤 Response status: {response.status_code}")
    return response


# ✅ Dynamically include all routers from the `api/routes` directory
routes_path = Path(__file__).parent / "routes"
for route_file in sorted(routes_path.glob("*.py")):
    if route_file.stem != "__init__":
        module_name = f"tabledrag_tree.api.routes.{route_file.stem}"
        module = importlib.import_module(module_name)
        if hasattr(module, "router"):
            app.include_router(getattr(module, "router"))
