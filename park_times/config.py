"""Configuration settings for park-times."""

from pathlib import Path

# Contact info for User-Agent
CONTACT_EMAIL = "park-times-bot@example.com"  # Replace with real email

# User-Agent header
USER_AGENT = f"ParkTimesBot/0.1 ({CONTACT_EMAIL})"

# HTTP settings
REQUEST_TIMEOUT = 15  # seconds
RATE_LIMIT_DELAY = 1.0  # seconds between requests to same host
MAX_RETRIES = 3
RETRY_BACKOFF_BASE = 2  # exponential backoff multiplier

# Content API endpoints
API_BASE_URL = "https://api.wdpromedia.com/facility-service"
DLP_SCHEDULE_URL = "https://api.disneylandparis.com/query/schedules"

# Park defaults
DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%:z"  # ISO 8601 with "+HH:MM" offset
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_API_REGION = "us"

# Output directories
OUTPUT_DIR = Path("public/data")
PARKS_OUTPUT_DIR = OUTPUT_DIR / "parks"

# Registry
PARKS_YAML = Path("parks.yaml")
