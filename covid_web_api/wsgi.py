import os

from django.conf import settings
from django.core.wsgi import get_wsgi_application

from covid_web_api.log import setup_logging

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "covid_web_api.settings")

application = get_wsgi_application()
setup_logging(settings.LOG_LEVEL)
