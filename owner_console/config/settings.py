"""
Console configuration settings
"""
import os
from datetime import timedelta


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class ConsoleConfig:
    """Centralized configuration for the owner console"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'change-me-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_HTTPONLY = True

    # Rate limiting
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"
    RATELIMIT_ENABLED = True

    # Upstream REST API
    API_URL = os.environ.get('API_URL', 'http://localhost:8000/api/v1')
    API_TIMEOUT = int(os.environ.get('API_TIMEOUT', 30))

    # Access control
    OWNER_ROLE = 'owner'
    LOGIN_PATH = '/login'

    # Browser polling intervals in milliseconds, served to the pages
    POLLING_INTERVALS = {
        'queues': 10000,       # Queue monitor page
        'metrics': 10000,      # System metrics page
        'cron_jobs': 30000,    # Cron job status page
        'dashboard': 30000,    # Admin dashboard cards
        'health': 30000,       # Health page fallback polling
    }

    # Server-side monitoring
    MONITOR_ENABLED = _env_bool('MONITOR_ENABLED', True)
    HEALTH_CHECK_INTERVAL = 30   # seconds
    HEALTH_CHECK_TIMEOUT = 3     # seconds
    SSE_HEARTBEAT_SECONDS = 30

    # Feed limits
    MAX_ACTIVITY_ENTRIES = 1000

    # Finance import
    IMPORT_ALLOWED_EXTENSIONS = ('.csv', '.xlsx', '.xls')
    IMPORT_HISTORY_LIMIT = 50

    # Queue maintenance defaults
    QUEUE_CLEAN_GRACE_MS = 1000 * 60 * 60 * 24
    QUEUE_PAGE_SIZE = 20

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Development server
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 8081))


class TestingConfig(ConsoleConfig):
    """Configuration used by the test suite"""

    TESTING = True
    SECRET_KEY = 'testing'
    API_URL = 'http://api.test/api/v1'
    MONITOR_ENABLED = False
    RATELIMIT_ENABLED = False
