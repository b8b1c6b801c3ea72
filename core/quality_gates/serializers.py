from rest_framework import serializers
from .models import QualityGate, QualityGateCondition


class QualityGateConditionSerializer(serializers.ModelSerializer):
    operator_display = serializers.CharField(source='get_operator_display', read_only=True)

    class Meta:
        model = QualityGateCondition
        fields = ['id', 'metric_key', 'operator', 'operator_display', 'warning_threshold', 'error_threshold', 'period']


class QualityGateSerializer(serializers.ModelSerializer):
    class Meta:
        model = QualityGate
        fields = ['id', 'name', 'is_default']


class QualityGateDetailSerializer(serializers.ModelSerializer):
    conditions = QualityGateConditionSerializer(many=True, read_only=True)

    class Meta:
        model = QualityGate
        fields = ['id', 'name', 'is_default', 'conditions', 'created_at', 'updated_at']
