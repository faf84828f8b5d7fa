"""ShopSmart FastAPI application.

Web server that processes commands synchronously via HTTP.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from shopsmart/domain.toml:
#   - unset        → in-memory providers
#   - "production" → PostgreSQL
from shopsmart.api.application import create_app  # noqa: E402
from shopsmart.domain import shopsmart  # noqa: E402

shopsmart.init()

app = create_app(shopsmart)
