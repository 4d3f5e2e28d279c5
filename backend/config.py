import os
from dotenv import load_dotenv

load_dotenv()

# Database (optional - rate cards and gift deals are only stored when set)
DATABASE_URL = os.environ.get("DATABASE_URL")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

# Quick estimate rate limiting (per client IP)
RATE_LIMIT_WINDOW_SECONDS = int(os.environ.get("RATE_LIMIT_WINDOW_SECONDS", "60"))
RATE_LIMIT_MAX_REQUESTS = int(os.environ.get("RATE_LIMIT_MAX_REQUESTS", "10"))
RATE_LIMIT_CLEANUP_THRESHOLD = int(os.environ.get("RATE_LIMIT_CLEANUP_THRESHOLD", "10000"))

# Brand vetting
BRAND_CACHE_CLEANUP_THRESHOLD = int(os.environ.get("BRAND_CACHE_CLEANUP_THRESHOLD", "1000"))
WEBSITE_CHECK_TIMEOUT_SECONDS = float(os.environ.get("WEBSITE_CHECK_TIMEOUT_SECONDS", "5.0"))
ENABLE_WEBSITE_CHECK = os.environ.get("ENABLE_WEBSITE_CHECK", "true").lower() == "true"

# Rate card quotes
QUOTE_VALID_DAYS = 14
