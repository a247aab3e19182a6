"""Production entry point: serve the blog service with Gunicorn.

Gunicorn options come from the environment so container images can be tuned
without rebuilding:

- ``PORT`` (default 8000)
- ``GUNICORN_WORKERS`` (default 4)
- ``GUNICORN_THREADS`` (default 2)
- ``GUNICORN_TIMEOUT`` in seconds (default 60)

Access and error logs go to stdout/stderr for the container runtime.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def gunicorn_argv() -> list[str]:
    """Build the Gunicorn command line from the environment."""
    return [
        "gunicorn",
        "blog_service.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "60"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start Gunicorn with the blog service WSGI application."""
    sys.argv = gunicorn_argv()
    run()


if __name__ == "__main__":
    main()
