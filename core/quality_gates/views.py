from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from django.shortcuts import get_object_or_404
from qualitygate_project.response_formatter import success_response, error_response
from .models import QualityGate
from .services import QualityGates
from .serializers import QualityGateSerializer, QualityGateDetailSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def quality_gate_list(request):
    """
    List all quality gates.
    """
    gates = QualityGates.get_quality_gates()
    serializer = QualityGateSerializer(gates, many=True)
    return Response(serializer.data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def quality_gate_detail(request, pk):
    """
    Retrieve a quality gate with its conditions.
    """
    get_object_or_404(QualityGate, pk=pk)
    gate = QualityGates.get_quality_gate(pk)
    serializer = QualityGateDetailSerializer(gate)
    return Response(serializer.data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def quality_gate_default(request):
    """
    Retrieve the default quality gate.
    """
    gate = QualityGates.get_default()
    if gate is None:
        return error_response(
            message="No default quality gate is defined",
            status_code=status.HTTP_404_NOT_FOUND
        )
    serializer = QualityGateDetailSerializer(gate)
    return Response(serializer.data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def quality_gate_set_default(request, pk):
    """
    Make a quality gate the default one.
    """
    get_object_or_404(QualityGate, pk=pk)
    gate = QualityGates.set_default(pk)
    return success_response(
        data=QualityGateSerializer(gate).data,
        message=f"Quality gate '{gate.name}' is now the default"
    )
