from __future__ import annotations

from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from invest_core.domain.brackets import INCOME_BRACKETS
from invest_core.services import pipeline, recommendation

from .serializers import (
    IncomeBracketSerializer,
    RecommendationSerializer,
    SimulationRequestSerializer,
    SimulationResultSerializer,
)


class BracketListView(APIView):
    def get(self, request):
        return Response(IncomeBracketSerializer(INCOME_BRACKETS, many=True).data)


class RecommendationView(APIView):
    def get(self, request, bracket_id: str):
        rec = recommendation.resolve_recommendation(bracket_id)
        return Response(RecommendationSerializer(rec).data)


class SimulationView(APIView):
    parser_classes = [JSONParser]

    def post(self, request):
        serializer = SimulationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        # Only submitted fields are present; null goes to the validator like any other raw value.
        outcome = pipeline.run_simulation(dict(serializer.validated_data))
        payload = {
            "result": SimulationResultSerializer(outcome.result).data,
            "validation": outcome.errors,
        }
        return Response(payload, status=status.HTTP_200_OK)
