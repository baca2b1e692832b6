import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from ENV_FILE if specified, or .env.local, or .env
env_file = os.getenv('ENV_FILE')
if env_file:
    load_dotenv(Path(env_file))
else:
    env_local = Path(__file__).parent.parent / '.env.local'
    if env_local.exists():
        load_dotenv(env_local)
    else:
        load_dotenv()


def _number_from_env(key: str, fallback: int) -> int:
    """Extract integer from environment variable with fallback."""
    raw = os.getenv(key)
    if raw is None:
        return fallback

    try:
        return int(raw)
    except ValueError:
        return fallback


# Postmark API configuration
POSTMARK_API_KEY = os.getenv('POSTMARK_API_KEY')
POSTMARK_API_URI = os.getenv('POSTMARK_API_URI', 'http://api.postmarkapp.com/')
POSTMARK_TIMEOUT_SECONDS = _number_from_env('POSTMARK_TIMEOUT_SECONDS', 30)

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_FILE = os.getenv('LOG_FILE')
