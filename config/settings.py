"""
Django settings for the storefront project.

Values come from the environment; a `.env` file (or the file named by
DJANGO_ENV_FILE) is loaded first when present.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

_explicit_env_file = os.environ.get('DJANGO_ENV_FILE')
if _explicit_env_file:
    load_dotenv(_explicit_env_file)
else:
    load_dotenv(BASE_DIR / '.env')


def _env_bool(name, default=False):
    return os.environ.get(name, str(default)).lower() in ('1', 'true', 'yes')


def _env_list(name, default=''):
    return [item.strip() for item in os.environ.get(name, default).split(',') if item.strip()]


SECRET_KEY = os.environ.get('SECRET_KEY', 'django-insecure-storefront-dev-key')

DEBUG = _env_bool('DEBUG', True)

ALLOWED_HOSTS = _env_list('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver')

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.staticfiles',
    'rest_framework',
    'apps.storefront',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

# Catalog data lives in Shopify; nothing is stored locally.
DATABASES = {}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Fallback when a locale has no format module
NUMBER_GROUPING = 3

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Django REST Framework: public, read-only storefront endpoints
REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
}

# Shopify Storefront API
SHOPIFY_STORE_DOMAIN = os.environ.get('SHOPIFY_STORE_DOMAIN', '')
SHOPIFY_STOREFRONT_ACCESS_TOKEN = os.environ.get('SHOPIFY_STOREFRONT_ACCESS_TOKEN', '')
SHOPIFY_API_VERSION = os.environ.get('SHOPIFY_API_VERSION', '2025-01')
# Unset means no timeout beyond the network stack default.
_request_timeout = os.environ.get('SHOPIFY_REQUEST_TIMEOUT')
SHOPIFY_REQUEST_TIMEOUT = float(_request_timeout) if _request_timeout else None

# Storefront display
STOREFRONT_COLLECTION_HANDLE = os.environ.get('STOREFRONT_COLLECTION_HANDLE', 'all')
STOREFRONT_COLLECTION_LIMIT = int(os.environ.get('STOREFRONT_COLLECTION_LIMIT', '12'))
STOREFRONT_PRICE_LOCALE = os.environ.get('STOREFRONT_PRICE_LOCALE', 'en-us')
STOREFRONT_PLACEHOLDER_IMAGE = STATIC_URL + 'storefront/img/placeholder-image.svg'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
        'apps': {
            'handlers': ['console'],
            'level': os.environ.get('STOREFRONT_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
