from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db import IntegrityError
from django.db.models import ProtectedError
import logging

from backend.utils import blocked_delete_message
from .models import Planting
from .serializers import PlantingSerializer, PlantingDetailSerializer

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def planting_list(request):
    """List plantings with variety and field names, or create one"""
    try:
        if request.method == 'GET':
            plantings = Planting.objects.select_related('variety', 'field').all()
            serializer = PlantingDetailSerializer(plantings, many=True)
            return Response(serializer.data)

        serializer = PlantingSerializer(data=request.data)
        if serializer.is_valid():
            planting = serializer.save()
            logger.info(f"Planting {planting.id} created on field {planting.field_id}")
            return Response(
                {'id': planting.id, 'message': 'Planting created successfully'},
                status=status.HTTP_201_CREATED
            )
        logger.warning(f"Planting creation validation error: {serializer.errors}")
        return Response(
            {'error': 'Invalid data provided', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.error(f"Error handling plantings: {str(e)}")
        return Response(
            {'error': 'Failed to process plantings', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def planting_detail(request, id):
    try:
        planting = Planting.objects.select_related('variety', 'field').get(id=id)
    except Planting.DoesNotExist:
        return Response({'error': 'Planting not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        if request.method == 'GET':
            return Response(PlantingDetailSerializer(planting).data)

        if request.method == 'PUT':
            serializer = PlantingSerializer(planting, data=request.data, partial=True)
            if serializer.is_valid():
                serializer.save()
                logger.info(f"Updated planting ID {id}")
                return Response({'success': True, 'message': 'Planting updated successfully'})
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            planting.delete()
        except (ProtectedError, IntegrityError) as e:
            logger.warning(f"Blocked delete of planting {id}: {str(e)}")
            return Response(
                {'error': blocked_delete_message('planting', e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        logger.info(f"Deleted planting ID {id}")
        return Response({'success': True, 'message': 'Planting deleted successfully'})
    except Exception as e:
        logger.error(f"Error in planting detail for ID {id}: {str(e)}")
        return Response(
            {'error': 'Failed to process planting', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
