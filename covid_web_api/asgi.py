import os

from django.conf import settings
from django.core.asgi import get_asgi_application

from covid_web_api.log import setup_logging

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "covid_web_api.settings")

application = get_asgi_application()
setup_logging(settings.LOG_LEVEL)
