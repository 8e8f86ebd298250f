#!/usr/bin/env python
import os
import sys


def main():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "covid_web_api.settings")

    from django.conf import settings
    from django.core.management import execute_from_command_line

    from covid_web_api.log import setup_logging

    setup_logging(settings.LOG_LEVEL)
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
