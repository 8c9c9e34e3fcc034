"""
Configuration and startup security checks for StudentMS.

Why: The web client holds no data of its own, but it decides where passwords
are sent. A production deployment must therefore talk to the backend over
TLS and must not advertise the demo accounts.

Permissions: The caller needs no special privileges. The helpers simply read
environment variables; the guard raises `SystemExit` on fatal misconfiguration.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..records.client import DEFAULT_BASE_URL

DEFAULT_SESSION_TTL_SECONDS = 28800


def _is_prod_like(env: str) -> bool:
    env_l = (env or "").lower()
    return env_l in {"prod", "production", "stage", "staging"}


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    environment: str = "dev"
    api_base_url: str = DEFAULT_BASE_URL
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS
    demo_login: bool = True

    @property
    def is_prod_like(self) -> bool:
        return _is_prod_like(self.environment)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        environment = (env.get("STUDENTMS_ENV") or "dev").strip().lower()
        base_url = (env.get("STUDENTMS_API_BASE_URL") or DEFAULT_BASE_URL).strip()
        try:
            ttl = int(env.get("STUDENTMS_SESSION_TTL_SECONDS") or DEFAULT_SESSION_TTL_SECONDS)
        except ValueError:
            ttl = DEFAULT_SESSION_TTL_SECONDS
        # Demo shortcuts default to on only where nobody real logs in.
        demo = _flag(env.get("STUDENTMS_DEMO_LOGIN"), default=not _is_prod_like(environment))
        return cls(
            environment=environment,
            api_base_url=base_url,
            session_ttl_seconds=max(60, ttl),
            demo_login=demo,
        )


def ensure_secure_config_on_startup(settings: Optional[Settings] = None) -> None:
    """Fail fast on insecure production configuration.

    Checks (production/staging only):
    - STUDENTMS_API_BASE_URL must use https, since login forwards passwords.
    - STUDENTMS_DEMO_LOGIN must be off; the demo accounts are public.
    """
    settings = settings or Settings.from_env()
    if not settings.is_prod_like:
        return  # dev/test remain permissive

    if not settings.api_base_url.lower().startswith("https://"):
        raise SystemExit(
            "Refusing to start: STUDENTMS_API_BASE_URL must use https in production."
        )

    if settings.demo_login:
        raise SystemExit(
            "Refusing to start: STUDENTMS_DEMO_LOGIN must be false in production/staging."
        )
