"""WSGI config exposing the ``application`` callable.

The database is checked once at start-up; a failure is logged by
``connect_db`` and the process keeps serving.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.database import connect_db  # noqa: E402

connect_db()
