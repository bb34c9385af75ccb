import os
import secrets
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name, default='false'):
    return os.environ.get(name, default).lower() in ['true', 'on', '1']


class Config:
    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # No sessions or cookies are issued, so a per-process key is sufficient
        SECRET_KEY = secrets.token_hex(32)

    # Application settings
    SITE_NAME = os.environ.get('SITE_NAME', 'Bibliotheque')

    # Logging level for the root logger and the Flask app logger
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'ERROR').upper()

    # Seed the catalog with the demonstration book on first use
    CATALOG_SEED_DEMO = _env_flag('CATALOG_SEED_DEMO', 'true')

    # Development server binding (used by `bibliotheque serve`)
    API_HOST = os.environ.get('API_HOST', '127.0.0.1')
    API_PORT = int(os.environ.get('API_PORT', 5054))

    # Debug settings (disabled by default)
    DEBUG_MODE = _env_flag('BIBLIOTHEQUE_DEBUG')
