"""HTTP server entry point (``catalog-serve``).

Runs the Django WSGI application under gunicorn with threaded workers:
one thread per in-flight request, ``WEB_THREADS`` threads per process.
Bind address, worker counts and the per-request deadline come from
settings (see ``config.settings``).

Exit status is 0 on clean shutdown and 1 when startup fails because the
configuration is invalid or the database cannot be reached.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Dict

import structlog
from decouple import UndefinedValueError
from gunicorn.app.base import BaseApplication

logger = structlog.get_logger(__name__)


class CatalogServer(BaseApplication):
    """Embedded gunicorn application serving a prepared WSGI callable."""

    def __init__(self, application, options: Dict[str, Any]) -> None:
        self.application = application
        self.options = options
        super().__init__()

    def load_config(self) -> None:
        for key, value in self.options.items():
            self.cfg.set(key, value)

    def load(self):
        return self.application


def _check_database() -> None:
    from django.db import connections

    conn = connections["default"]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
    conn.close()


def main() -> int:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

    from django.core.exceptions import ImproperlyConfigured
    from django.db import DatabaseError

    try:
        from django.conf import settings

        from config.wsgi import application

        _check_database()
    except (ImproperlyConfigured, UndefinedValueError, ValueError) as exc:
        logger.error("startup_failed", reason="configuration", error=str(exc))
        return 1
    except DatabaseError as exc:
        logger.error("startup_failed", reason="database_unreachable", error=str(exc))
        return 1

    options = {
        "bind": f"{settings.HOST}:{settings.PORT}",
        "workers": settings.WEB_WORKERS,
        "worker_class": "gthread",
        "threads": settings.WEB_THREADS,
        "timeout": settings.REQUEST_TIMEOUT,
        "accesslog": "-",
    }
    logger.info("server_starting", **options)
    CatalogServer(application, options).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
