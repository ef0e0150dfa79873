from __future__ import annotations

from rest_framework import serializers


class SimulationRequestSerializer(serializers.Serializer):
    # Raw values of any JSON type: coercion and clamping happen in the validation service.
    initial_capital = serializers.JSONField(required=False, allow_null=True)
    monthly_contribution = serializers.JSONField(required=False, allow_null=True)
    annual_rate_percent = serializers.JSONField(required=False, allow_null=True)
    years = serializers.JSONField(required=False, allow_null=True)
    income_bracket_id = serializers.JSONField(required=False, allow_null=True)


class RecommendationSerializer(serializers.Serializer):
    recommended_monthly_amount = serializers.FloatField()
    percentage_of_income = serializers.FloatField()
    notice = serializers.CharField(allow_null=True)


class SimulationPointSerializer(serializers.Serializer):
    period_index = serializers.IntegerField()
    cumulative_total = serializers.FloatField()
    cumulative_contributed = serializers.FloatField()


class SimulationResultSerializer(serializers.Serializer):
    final_total = serializers.FloatField()
    total_contributed = serializers.FloatField()
    total_gain = serializers.FloatField()
    recommendation = RecommendationSerializer()
    series = SimulationPointSerializer(many=True)


class IncomeBracketSerializer(serializers.Serializer):
    id = serializers.CharField()
    label = serializers.CharField()
    min_income = serializers.FloatField()
    max_income = serializers.FloatField()
    recommended_savings_rate = serializers.FloatField()
