import os
import sys
from dotenv import load_dotenv

# Load environment variables from .env file
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
dotenv_path = os.path.join(BASE_DIR, '.env')

# Load the .env file from that specific path
load_dotenv(dotenv_path=dotenv_path)


class Config:
    """Base configuration class."""

    SECRET_KEY = os.getenv('SECRET_KEY') or 'dev-fallback-secret-key-change-in-prod'

    # Flask-Caching settings. Workspaces live only in process memory.
    CACHE_TYPE = os.getenv('CACHE_TYPE', 'SimpleCache')
    CACHE_DEFAULT_TIMEOUT = int(os.getenv('CACHE_DEFAULT_TIMEOUT', 0))
    # SimpleCache prunes live entries once it holds more than CACHE_THRESHOLD keys,
    # so workspaces are kept unbounded unless the environment caps them.
    CACHE_THRESHOLD = int(os.getenv('CACHE_THRESHOLD', sys.maxsize))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Your application-specific config
    EXPORT_CSV_FILENAME = 'achievements.csv'
