import sys
from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger
from rest_framework.test import APIClient


FIRST_DATE = datetime(2020, 3, 10, tzinfo=timezone.utc)


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Configure logging for tests."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )

    yield

    logger.remove()


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_case():
    """Create a case; each call gets the next day unless a date is given."""
    from cases.models import Case

    counter = {"days": 0}

    def _make_case(**fields):
        values = {
            "number_of_case": 100,
            "number_of_death": 2,
            "number_of_recovered": 10,
            "location": "Lagos",
            "date": FIRST_DATE + timedelta(days=counter["days"]),
        }
        values.update(fields)
        counter["days"] += 1
        return Case.objects.create(**values)

    return _make_case


@pytest.fixture
def make_cases(make_case):
    def _make_cases(count, **fields):
        return [make_case(**fields) for _ in range(count)]

    return _make_cases
