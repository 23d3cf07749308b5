"""ASGI config for triatapp project."""

import os

from django.core.asgi import get_asgi_application


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "triatapp.settings")

application = get_asgi_application()
