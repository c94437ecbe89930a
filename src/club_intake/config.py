"""Configuration loader for the club intake service"""

import os
from pathlib import Path

from dotenv import load_dotenv

project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

# Load .env file if it exists. For local development only.
if env_path.exists():
    load_dotenv(env_path)

# Configuration dictionary - set once at initialization
config = {
    "database_url": os.getenv("DATABASE_URL"),
    "port": int(os.getenv("PORT", "8000")),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "environment": os.getenv("ENVIRONMENT", "development"),
    # Static bearer token for the admin dashboard
    "admin_secret_code": os.getenv("ADMIN_SECRET_CODE"),
    # Shared secret sent by the external scheduler in x-cron-secret
    "cron_secret": os.getenv("CRON_SECRET"),
    "mailgun_api_key": os.getenv("MAILGUN_API_KEY"),
    "mailgun_domain": os.getenv("MAILGUN_DOMAIN"),
    "sender_email": os.getenv("SENDER_EMAIL"),
    "board_email": os.getenv("BOARD_EMAIL"),
    "club_name": os.getenv("CLUB_NAME", "VinnovateIT"),
    "max_page_size": int(os.getenv("MAX_PAGE_SIZE", "100")),
}
