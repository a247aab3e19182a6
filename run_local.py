#!/usr/bin/env python
"""Script to run the Django development server."""

import os
import sys

from django.core.management import call_command, execute_from_command_line


def main():
    """Apply pending migrations and run the Django development server.

    The blog service owns its schema, so the local database is brought up to
    date before the server starts.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "blog_service.settings")

    import django  # noqa: PLC0415

    django.setup()
    call_command("migrate", interactive=False)
    execute_from_command_line([sys.argv[0], "runserver"])


if __name__ == "__main__":
    main()
