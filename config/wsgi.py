"""
WSGI entrypoint. Configures Django and exposes the application
defined in the WSGI_APPLICATION setting.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
application = get_wsgi_application()
