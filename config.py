import os  # Read environment variables.
from dotenv import load_dotenv  # Load variables from a .env file.

load_dotenv()  # Pull values from .env into process environment.

DATABASE_URL = os.getenv("DATABASE_URL")  # Connection string for the database.
if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable not set")

# Ensure we use the async driver.
if DATABASE_URL.startswith("postgresql://"):
    DATABASE_URL = DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)

SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE")  # Optional; no file handler when unset.

# Flat rate billed per consultation.
CONSULTATION_RATE = float(os.getenv("CONSULTATION_RATE", "50"))

SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() == "true"

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
