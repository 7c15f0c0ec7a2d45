#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def _is_test_run(argv: list[str]) -> bool:
    """Return True if the command is `test` without an explicit settings module."""
    if len(argv) < 2 or argv[1] != "test":
        return False
    return not any(arg == "--settings" or arg.startswith("--settings=") for arg in argv)


def main():
    """Run administrative tasks."""
    default = 'extkit.settings.test_cli' if _is_test_run(sys.argv) else 'extkit.settings.dev'
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', default)
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
