"""Service settings.

Read from the environment once, by the entry points, and handed to the
components that need them.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    host: str = "localhost"
    app_port: int = 5002
    database_url: str | None = None
    product_url: str = "http://localhost:5001"
    catalog_timeout: float = 5.0
    request_timeout: float = 10.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables, falling back to defaults.

        Raises ValueError when APP_PORT, CATALOG_TIMEOUT or REQUEST_TIMEOUT are not
        numbers.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        return cls(
            host=env.get("HOST", defaults.host),
            app_port=int(env.get("APP_PORT", defaults.app_port)),
            database_url=env.get("DATABASE_URL") or defaults.database_url,
            product_url=env.get("PRODUCT_URL", defaults.product_url).rstrip("/"),
            catalog_timeout=float(env.get("CATALOG_TIMEOUT", defaults.catalog_timeout)),
            request_timeout=float(env.get("REQUEST_TIMEOUT", defaults.request_timeout)),
        )
