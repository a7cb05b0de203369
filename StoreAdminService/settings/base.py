"""
Base Django settings for StoreAdminService.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "django-insecure-8v!x2q$k4m(store-admin)^w7r0b#t9j3n%e6p1z@c5h&y"
)

# Application definition
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "StoreAdminService.apps.StoreAdminServiceConfig",
    "core",
    "accounts",
    "brands",
    "categories",
    "products",
    "uploads",
    "api",
]

AUTH_USER_MODEL = "accounts.User"

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware
    "core.middleware.observability.ObservabilityMiddleware",
    "core.middleware.metrics.MetricsMiddleware",
    "core.middleware.rate_limit.RateLimitMiddleware",
    "core.middleware.auth.DashboardAccessMiddleware",
]

ROOT_URLCONF = "StoreAdminService.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "StoreAdminService.wsgi.application"
ASGI_APPLICATION = "StoreAdminService.asgi.application"

# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.environ.get("DB_NAME", "store_admin"),
        "USER": os.environ.get("DB_USER", "postgres"),
        "PASSWORD": os.environ.get("DB_PASSWORD", "postgres"),
        "HOST": os.environ.get("DB_HOST", "localhost"),
        "PORT": os.environ.get("DB_PORT", "5432"),
        "OPTIONS": {
            "connect_timeout": 10,
        },
    }
}

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {"min_length": 8},
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Uploaded media (local storage backend)
MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "media"

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.MultiPartParser",
        "rest_framework.parsers.FormParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [],
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "Store Admin Service API",
    "DESCRIPTION": (
        "E-commerce administration API. "
        "Provides dashboard endpoints for managing brands, categories and products, "
        "public storefront browsing, authentication and image uploads."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/api/v1",
    "TAGS": [
        {"name": "Auth", "description": "Registration, login and session"},
        {"name": "Dashboard", "description": "Catalog management for administrators"},
        {"name": "Storefront", "description": "Public product browsing"},
        {"name": "Uploads", "description": "Image upload and deletion"},
        {"name": "Health", "description": "Health check endpoints"},
    ],
}

# Redis Cache
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": os.environ.get("REDIS_URL", "redis://127.0.0.1:6379/1"),
        "OPTIONS": {
            "socket_connect_timeout": 5,
            "socket_timeout": 5,
        },
    }
}

# Celery
CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "redis://127.0.0.1:6379/0")
CELERY_RESULT_BACKEND = os.environ.get("CELERY_RESULT_BACKEND", CELERY_BROKER_URL)
CELERY_TASK_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT = ["json"]

# Catalog
CATALOG_CACHE_TTL = int(os.environ.get("CATALOG_CACHE_TTL", "300"))
# Delete images of removed products from the storage provider
CATALOG_MEDIA_CLEANUP = os.environ.get("CATALOG_MEDIA_CLEANUP", "true").lower() == "true"

# Auth endpoint throttling (requests per minute per client IP)
AUTH_RATE_LIMIT = int(os.environ.get("AUTH_RATE_LIMIT", "20"))

# Image uploads
UPLOADS = {
    # One of: firebase, vercel_blob, local
    "BACKEND": os.environ.get("UPLOADS_BACKEND", "firebase"),
    "MAX_FILE_SIZE": 1024 * 1024,
    "PATH_PREFIX": "items",
    "HTTP_TIMEOUT": 15,
    "FIREBASE_BUCKET": os.environ.get("FIREBASE_STORAGE_BUCKET", ""),
    "FIREBASE_TOKEN": os.environ.get("FIREBASE_STORAGE_TOKEN", ""),
    "VERCEL_BLOB_TOKEN": os.environ.get("BLOB_READ_WRITE_TOKEN", ""),
    "UPLOADTHING_SECRET": os.environ.get("UPLOADTHING_SECRET", ""),
}

# Hosts whose images the dashboard accepts
IMAGE_HOSTS = [
    "firebasestorage.googleapis.com",
    "utfs.io",
    "*.public.blob.vercel-storage.com",
]

# Observability
LOGGING = get_logging_config(os.environ.get("ENVIRONMENT", "development"))
