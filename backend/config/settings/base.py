"""
Base settings for the kitchen boards project.

Shared by dev and prod. Values come from the environment or a .env file.
"""

from pathlib import Path

from decouple import config, Csv

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# =============================================================================
# SECURITY
# =============================================================================
SECRET_KEY = config('SECRET_KEY', default='insecure-dev-key-change-me')

DEBUG = config('DEBUG', default=False, cast=bool)

ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

# =============================================================================
# APPLICATIONS
# =============================================================================
INSTALLED_APPS = [
    'rest_framework',
    'presentation.boards',
]

# No database: the boards live in memory for the lifetime of the process.
DATABASES = {}

# =============================================================================
# INTERNATIONALIZATION
# =============================================================================
LANGUAGE_CODE = 'zh-hant'
TIME_ZONE = config('TIME_ZONE', default='Asia/Taipei')
USE_I18N = True
USE_TZ = True

# =============================================================================
# REST FRAMEWORK
# =============================================================================
REST_FRAMEWORK = {
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'COERCE_DECIMAL_TO_STRING': True,
}

# =============================================================================
# BOARDS
# =============================================================================
BOARDS_ORDER_LABEL_PREFIX = config('BOARDS_ORDER_LABEL_PREFIX', default='#order')
BOARDS_PRICE_CURRENCY = config('BOARDS_PRICE_CURRENCY', default='TWD')

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = config('LOG_LEVEL', default='INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'application': {
            'level': LOG_LEVEL,
        },
        'presentation': {
            'level': LOG_LEVEL,
        },
    },
}
