"""Counter FastAPI application.

Builds the app from environment settings and processes every request
synchronously inside the counter domain context.

Usage:
    uvicorn app:app --host 0.0.0.0 --port 5002
"""

from counter.api.app import create_app
from counter.domain import counter
from counter.settings import Settings
from counter.utils.db import configure_database

settings = Settings.from_env()

configure_database(counter, settings.database_url)
counter.init()

app = create_app(counter, settings)
