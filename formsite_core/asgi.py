"""
ASGI config for the formsite project.

It exposes the ASGI callable as a module-level variable named ``application``.
Run it under any ASGI server, e.g. ``uvicorn formsite_core.asgi:application``.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "formsite_core.settings.dev")

application = get_asgi_application()
