import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./serviceboard.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Customer master data table
CUSTOMER_PAGE_SIZE = int(os.getenv("CUSTOMER_PAGE_SIZE", "10"))
CUSTOMER_TABLE_NAME = os.getenv("CUSTOMER_TABLE_NAME", "Tblanl_eigentuemer")
# Delay between the last keystroke and the customer search fetch
SEARCH_DEBOUNCE_SECONDS = float(os.getenv("SEARCH_DEBOUNCE_SECONDS", "0.3"))

# Maintenance calendar defaults: 1week, 2weeks, 3weeks or 4weeks / columns or rows
DEFAULT_VIEW_RANGE = os.getenv("DEFAULT_VIEW_RANGE", "4weeks")
DEFAULT_VIEW_MODE = os.getenv("DEFAULT_VIEW_MODE", "columns")
# Number of ISO weeks offered in the tour planning week picker
PLANNING_WEEK_COUNT = int(os.getenv("PLANNING_WEEK_COUNT", "12"))

# JSON file with technicians, maintenance tasks and service tickets
SEED_DATA_FILE = os.getenv("SEED_DATA_FILE")

# Frontend origins allowed by CORS
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
