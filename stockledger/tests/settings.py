"""
Minimal Django settings for running the Stockledger test suite.
"""

import os
import tempfile

SECRET_KEY = 'stockledger-tests'

DEBUG = False

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'stockledger',
]

# File-backed so concurrency tests can share one database across threads.
# Per-process names keep parallel runs from clobbering each other.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join(tempfile.gettempdir(), f'stockledger_{os.getpid()}.sqlite3'),
        'TEST': {
            'NAME': os.path.join(tempfile.gettempdir(), f'test_stockledger_{os.getpid()}.sqlite3'),
        },
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'

STOCKLEDGER = {
    'LOCK_TIMEOUT_SECONDS': 5,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
    },
    'loggers': {
        'stockledger': {'handlers': ['console'], 'level': 'WARNING'},
    },
}
