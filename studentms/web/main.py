"StudentMS web client"
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..identity_access.guards import LOGIN_PATH
from ..identity_access.stores import SessionStore
from ..records.client import RecordsApi
from ..screens.registry import ScreenRegistry
from ..screens.toast import Clock
from .config import Settings, ensure_secure_config_on_startup
from .routes import (
    add_student_router,
    auth_router,
    dashboard_router,
    operations_router,
    students_router,
    users_router,
)


def _should_load_dotenv() -> bool:
    """Decide if we should load a local .env file.

    - Never load under pytest to avoid contaminating test env.
    - Allow explicit opt-out/opt-in via STUDENTMS_ENABLE_DOTENV (default true
      outside pytest).
    """
    # Under pytest, do not load .env; tests provide their own env.
    if "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST"):
        return False
    flag = (os.getenv("STUDENTMS_ENABLE_DOTENV", "true") or "").strip().lower()
    return flag in ("1", "true", "yes")


if _should_load_dotenv():
    from dotenv import load_dotenv

    load_dotenv()

logger = logging.getLogger("studentms.web")
static_dir = Path(__file__).parent / "static"


def create_app(
    settings: Optional[Settings] = None,
    *,
    session_store: Optional[SessionStore] = None,
    api: Optional[RecordsApi] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """Build the ASGI app.

    Tests pass their own RecordsApi (backed by httpx.MockTransport), session
    store and toast clock; production uses the environment.
    """
    settings = settings or Settings.from_env()
    # Minimal production safety checks (fail-fast on insecure config)
    ensure_secure_config_on_startup(settings)

    app = FastAPI(title="StudentMS", description="Student records management client", version=__version__)
    app.state.settings = settings
    app.state.session_store = session_store or SessionStore(ttl_seconds=settings.session_ttl_seconds)
    app.state.api = api or RecordsApi(settings.api_base_url)
    app.state.screens = ScreenRegistry()
    app.state.csrf_tokens = {}
    app.state.clock = clock

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        # Components render no inline script or style, so CSP can stay strict.
        csp = (
            "default-src 'self'; script-src 'self'; style-src 'self'; "
            "img-src 'self' data:; font-src 'self' data:; connect-src 'self'; "
            "form-action 'self'; frame-ancestors 'none';"
        )
        response.headers.setdefault("Content-Security-Policy", csp)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
        if settings.is_prod_like:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response

    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    app.include_router(operations_router)
    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(students_router)
    app.include_router(add_student_router)
    app.include_router(users_router)

    # Registered last: any unknown GET path lands on the login screen,
    # which forwards authenticated sessions to the dashboard.
    @app.get("/{full_path:path}", include_in_schema=False)
    async def catch_all(full_path: str):
        return RedirectResponse(url=LOGIN_PATH, status_code=303)

    logger.info("StudentMS started (env=%s, backend=%s)", settings.environment, settings.api_base_url)
    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    logging.basicConfig(level=os.getenv("STUDENTMS_LOG_LEVEL", "INFO").upper())
    uvicorn.run(
        "studentms.web.main:create_app",
        factory=True,
        host=os.getenv("STUDENTMS_HOST", "127.0.0.1"),
        port=int(os.getenv("STUDENTMS_PORT", "8000")),
    )
