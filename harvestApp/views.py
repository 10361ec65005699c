# views.py
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
import logging

from .models import Harvest
from .serializers import HarvestSerializer, HarvestCreateSerializer, HarvestUpdateSerializer

logger = logging.getLogger(__name__)


def harvest_queryset():
    return Harvest.objects.select_related('planting__field', 'planting__variety')


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def harvest_list(request):
    """List harvests with field and variety names, or register a new one"""
    if request.method == 'GET':
        try:
            harvests = harvest_queryset().all()
            serializer = HarvestSerializer(harvests, many=True)
            return Response(serializer.data)
        except Exception as e:
            logger.error(f"Error listing harvests: {str(e)}")
            return Response(
                {'error': 'Failed to fetch harvests', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

    serializer = HarvestCreateSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Harvest validation error: {serializer.errors}")
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        harvest_id = Harvest.objects.register(**serializer.validated_data)
    except ValidationError as e:
        return Response(
            {'error': 'Invalid data provided', 'details': e.messages},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.error(f"Database error registering harvest: {str(e)}")
        return Response(
            {'error': 'Database error', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    logger.info(f"Harvest {harvest_id} registered")
    return Response(
        {
            'success': True,
            'id': harvest_id,
            'message': 'Harvest record created successfully'
        },
        status=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([AllowAny])
def harvest_detail(request, harvest_id):
    """Get, update or delete a harvest record"""
    try:
        harvest = harvest_queryset().get(id=harvest_id)
    except Harvest.DoesNotExist:
        return Response({'error': 'Harvest not found'}, status=status.HTTP_404_NOT_FOUND)

    if request.method == 'GET':
        return Response(HarvestSerializer(harvest).data)

    if request.method == 'DELETE':
        try:
            harvest.delete()
        except Exception as e:
            logger.error(f"Error deleting harvest {harvest_id}: {str(e)}")
            return Response(
                {'error': 'Failed to delete harvest', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        logger.info(f"Deleted harvest ID {harvest_id}")
        return Response({'success': True, 'message': 'Harvest deleted'})

    serializer = HarvestUpdateSerializer(harvest, data=request.data, partial=True)
    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        serializer.save()
    except Exception as e:
        logger.error(f"Error updating harvest {harvest_id}: {str(e)}")
        return Response(
            {'error': 'Failed to update harvest', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    logger.info(f"Updated harvest ID {harvest_id}")
    return Response({'success': True, 'message': 'Harvest updated'})
