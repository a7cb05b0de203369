"""
Celery configuration for background tasks.

Used for storage cleanup after catalog changes.
"""
import os

from celery import Celery

# Set default Django settings module
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "StoreAdminService.settings.dev")

app = Celery("StoreAdminService")

# Load configuration from Django settings
app.config_from_object("django.conf:settings", namespace="CELERY")

# Auto-discover tasks from all installed apps
app.autodiscover_tasks()
