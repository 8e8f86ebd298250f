from loguru import logger
from rest_framework import mixins, serializers, viewsets
from rest_framework.response import Response

from cases.models import DEFAULT_PAGE, DEFAULT_PER_PAGE, Case


class CaseSerializer(serializers.ModelSerializer):
    numberOfCase = serializers.IntegerField(source="number_of_case")
    numberOfDeath = serializers.IntegerField(source="number_of_death")
    numberOfRecovered = serializers.IntegerField(source="number_of_recovered")
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Case
        fields = [
            "id",
            "numberOfCase",
            "numberOfDeath",
            "numberOfRecovered",
            "location",
            "date",
            "createdAt",
            "updatedAt",
        ]


class CaseListParamsSerializer(serializers.Serializer):
    page = serializers.IntegerField(default=DEFAULT_PAGE, min_value=1)
    perPage = serializers.IntegerField(default=DEFAULT_PER_PAGE)
    location = serializers.CharField(required=False)
    date = serializers.DateTimeField(required=False)


class CaseViewSet(mixins.CreateModelMixin, viewsets.GenericViewSet):
    queryset = Case.objects.all()
    serializer_class = CaseSerializer

    def list(self, request):
        params = CaseListParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        filters = params.validated_data

        cases = Case.objects.list_cases(
            page=filters["page"],
            per_page=filters["perPage"],
            location=filters.get("location"),
            date=filters.get("date"),
        )
        return Response(self.get_serializer(cases, many=True).data)

    def retrieve(self, request, pk=None):
        case = Case.objects.get_case(pk)
        return Response(self.get_serializer(case).data)

    def perform_create(self, serializer):
        case = serializer.save()
        logger.info("Created case {} for {}", case.pk, case.location)
