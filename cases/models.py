from django.core.exceptions import ValidationError
from django.db import models
from loguru import logger
from rest_framework import status

from cases.errors import APIError

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 30

# BigAutoField is a signed 64-bit integer
PK_MIN = -(2 ** 63)
PK_MAX = 2 ** 63 - 1


class CaseQuerySet(models.QuerySet):

    def matching(self, location=None, date=None):
        """Exact-match filter on location and date, skipping the ones not given."""
        filters = {
            key: value
            for key, value in {"location": location, "date": date}.items()
            if value is not None
        }
        return self.filter(**filters)

    def newest_first(self):
        return self.order_by("-created_at", "-id")

    def paginate(self, page=DEFAULT_PAGE, per_page=DEFAULT_PER_PAGE):
        # per_page <= 0 means no pagination
        if per_page > 0:
            offset = per_page * (page - 1)
            return self[offset:offset + per_page]
        return self


class CaseManager(models.Manager.from_queryset(CaseQuerySet)):

    def _coerce_pk(self, case_id):
        # to_python truncates floats and bools, so only ints and strings are ids
        if isinstance(case_id, bool) or not isinstance(case_id, (int, str)):
            return None
        try:
            pk = self.model._meta.pk.to_python(case_id)
        except ValidationError:
            return None
        if pk is None or not PK_MIN <= pk <= PK_MAX:
            return None
        return pk

    def _not_found(self, case_id):
        logger.debug("Case {!r} does not exist", case_id)
        return APIError(message="Case does not exist", status_code=status.HTTP_404_NOT_FOUND)

    def get_case(self, case_id):
        """
        Get a case by id.

        Ids that are not valid primary keys are treated the same way as
        unknown ones: both raise a 404 APIError.
        """
        case = None
        pk = self._coerce_pk(case_id)
        if pk is not None:
            case = self.filter(pk=pk).first()
        if case is None:
            raise self._not_found(case_id)
        return case

    async def aget_case(self, case_id):
        case = None
        pk = self._coerce_pk(case_id)
        if pk is not None:
            case = await self.filter(pk=pk).afirst()
        if case is None:
            raise self._not_found(case_id)
        return case

    def _list_queryset(self, page, per_page, location, date):
        logger.debug(
            "Listing cases page={} per_page={} location={!r} date={!r}",
            page, per_page, location, date,
        )
        return self.matching(location=location, date=date).newest_first().paginate(page, per_page)

    def list_cases(self, page=DEFAULT_PAGE, per_page=DEFAULT_PER_PAGE, location=None, date=None):
        """List cases, most recently created first."""
        return list(self._list_queryset(page, per_page, location, date))

    async def alist_cases(self, page=DEFAULT_PAGE, per_page=DEFAULT_PER_PAGE, location=None, date=None):
        return [case async for case in self._list_queryset(page, per_page, location, date)]


class Case(models.Model):
    number_of_case = models.IntegerField()
    number_of_death = models.IntegerField()
    number_of_recovered = models.IntegerField()
    location = models.CharField(max_length=100, db_index=True)
    date = models.DateTimeField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CaseManager()

    def __str__(self):
        return f"{self.location} {self.date:%Y-%m-%d}"
