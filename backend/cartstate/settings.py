import logging
import os
from pathlib import Path
from dotenv import load_dotenv
from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent
# Try root project .env (one directory up from BASE_DIR) first, then local
root_env = (BASE_DIR.parent / '.env')
local_env = (BASE_DIR / '.env')
if root_env.exists():
    load_dotenv(root_env)
elif local_env.exists():
    load_dotenv(local_env)

DEBUG = os.getenv('DEBUG', 'True') == 'True'

# ---------------------------------------------------------------------------
# LOGGING
# CART_LOG_LEVEL wins; otherwise DEBUG builds log every cart mutation and
# non-debug builds only log INFO and above.
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv('CART_LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
LOG_FORMAT = os.getenv(
    'CART_LOG_FORMAT', '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
)

if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ImproperlyConfigured(
        f'CART_LOG_LEVEL={LOG_LEVEL!r} is not a valid logging level. '
        'Use one of DEBUG, INFO, WARNING, ERROR or CRITICAL.'
    )

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': LOG_FORMAT,
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'default',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
