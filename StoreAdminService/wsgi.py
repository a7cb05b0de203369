"""
WSGI config for StoreAdminService project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "StoreAdminService.settings.prod")

application = get_wsgi_application()
