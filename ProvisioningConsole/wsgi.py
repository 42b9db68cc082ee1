"""
WSGI config for ProvisioningConsole.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ProvisioningConsole.settings.dev")

application = get_wsgi_application()
