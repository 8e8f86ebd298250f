import csv
from datetime import datetime, time, timezone as dt_timezone

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from loguru import logger

from cases.models import Case

FIELDS = {
    "numberOfCase": "number_of_case",
    "numberOfDeath": "number_of_death",
    "numberOfRecovered": "number_of_recovered",
}


def parse_timestamp(value):
    # Accept plain dates as well as full ISO timestamps
    value = value.strip()
    parsed = parse_datetime(value)
    if parsed is None:
        day = parse_date(value)
        if day is None:
            raise ValueError(f"invalid date {value!r}")
        parsed = datetime.combine(day, time())
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def read_cases(file_path):
    """Yield (line_number, Case) for every row that parses, None for the others."""
    with open(file_path, newline="") as fo:
        reader = csv.DictReader(fo)
        missing = {"date", "location", *FIELDS} - set(reader.fieldnames or [])
        if missing:
            raise CommandError(f"Missing columns in {file_path}: {', '.join(sorted(missing))}")

        for line, row in enumerate(reader, start=2):
            try:
                values = {field: int(row[column]) for column, field in FIELDS.items()}
                values["date"] = parse_timestamp(row["date"])
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning("Skipping line {}: {}", line, e)
                yield line, None
                continue

            yield line, Case(location=(row["location"] or "").strip(), **values)


class Command(BaseCommand):
    help = "Import case counts from a CSV file with date, location, numberOfCase, numberOfDeath and numberOfRecovered columns."

    def add_arguments(self, parser):
        parser.add_argument("file_path", type=str)

    def handle(self, *args, **options):
        file_path = options["file_path"]

        cases = []
        seen_dates = set()
        skipped = 0

        for line, case in read_cases(file_path):
            if case is None:
                skipped += 1
                continue

            try:
                case.full_clean()
            except ValidationError as e:
                logger.warning("Skipping line {}: {}", line, e.message_dict)
                skipped += 1
                continue

            # full_clean only sees rows already in the database
            if case.date in seen_dates:
                logger.warning("Skipping line {}: duplicate date {}", line, case.date)
                skipped += 1
                continue

            seen_dates.add(case.date)
            cases.append(case)

        with transaction.atomic():
            Case.objects.bulk_create(cases)

        logger.info("Imported {} cases from {}", len(cases), file_path)
        self.stdout.write(f"Imported {len(cases)} cases, skipped {skipped}")
