from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db import IntegrityError
from django.db.models import Count, Q, ProtectedError
import logging

from backend.utils import blocked_delete_message
from .models import Farm, Field, Variety
from .serializers import FarmSerializer, FieldSerializer, FieldSummarySerializer, VarietySerializer

logger = logging.getLogger(__name__)


def annotated_fields():
    """Fields with linked sensor and pending task counts (outer joins, never null)."""
    return Field.objects.annotate(
        sensor_count=Count('sensors', distinct=True),
        pending_task_count=Count(
            'tasks',
            filter=Q(tasks__status='Pending'),
            distinct=True
        ),
    ).order_by('id')


# ============ FARM VIEWS ============

@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def farm_list(request):
    try:
        if request.method == 'GET':
            farms = Farm.objects.all()
            serializer = FarmSerializer(farms, many=True)
            return Response(serializer.data)

        serializer = FarmSerializer(data=request.data)
        if serializer.is_valid():
            farm = serializer.save()
            logger.info(f"Farm {farm.id} created")
            return Response(
                {'id': farm.id, 'message': 'Farm created successfully'},
                status=status.HTTP_201_CREATED
            )
        logger.warning(f"Farm creation validation error: {serializer.errors}")
        return Response(
            {'error': 'Invalid data provided', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.error(f"Error handling farms: {str(e)}")
        return Response(
            {'error': 'Failed to process farms', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def farm_detail(request, id):
    try:
        farm = Farm.objects.get(id=id)
    except Farm.DoesNotExist:
        return Response({'error': 'Farm not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        if request.method == 'GET':
            return Response(FarmSerializer(farm).data)

        if request.method == 'PUT':
            serializer = FarmSerializer(farm, data=request.data, partial=True)
            if serializer.is_valid():
                serializer.save()
                logger.info(f"Updated farm ID {id}")
                return Response({'success': True, 'message': 'Farm updated successfully'})
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            farm.delete()
        except (ProtectedError, IntegrityError) as e:
            logger.warning(f"Blocked delete of farm {id}: {str(e)}")
            return Response(
                {'error': blocked_delete_message('farm', e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        logger.info(f"Deleted farm ID {id}")
        return Response({'success': True, 'message': 'Farm deleted successfully'})
    except Exception as e:
        logger.error(f"Error in farm detail for ID {id}: {str(e)}")
        return Response(
            {'error': 'Failed to process farm', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


# ============ FIELD VIEWS ============

@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def field_list(request):
    try:
        if request.method == 'GET':
            fields = annotated_fields()
            serializer = FieldSummarySerializer(fields, many=True)
            logger.info(f"Retrieved {len(serializer.data)} fields")
            return Response(serializer.data)

        serializer = FieldSerializer(data=request.data)
        if serializer.is_valid():
            field = serializer.save()
            logger.info(f"Field {field.id} created on farm {field.farm_id}")
            return Response(
                {'id': field.id, 'message': 'Field created successfully'},
                status=status.HTTP_201_CREATED
            )
        logger.warning(f"Field creation validation error: {serializer.errors}")
        return Response(
            {'error': 'Name and area are required', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.error(f"Error handling fields: {str(e)}")
        return Response(
            {'error': 'Failed to process fields', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def field_detail(request, id):
    try:
        field = annotated_fields().get(id=id)
    except Field.DoesNotExist:
        return Response({'error': 'Field not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        if request.method == 'GET':
            return Response(FieldSummarySerializer(field).data)

        if request.method == 'PUT':
            serializer = FieldSerializer(field, data=request.data, partial=True)
            if serializer.is_valid():
                serializer.save()
                logger.info(f"Updated field ID {id}")
                return Response({'success': True, 'message': 'Field updated successfully'})
            logger.warning(f"Update validation error for field {id}: {serializer.errors}")
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            field.delete()
        except (ProtectedError, IntegrityError) as e:
            logger.warning(f"Blocked delete of field {id}: {str(e)}")
            return Response(
                {'error': blocked_delete_message('field', e, hint="set the field status to 'Retired'")},
                status=status.HTTP_400_BAD_REQUEST
            )
        logger.info(f"Deleted field ID {id}")
        return Response({'success': True, 'message': 'Field deleted successfully'})
    except Exception as e:
        logger.error(f"Error in field detail for ID {id}: {str(e)}")
        return Response(
            {'error': 'Failed to process field', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


# ============ VARIETY VIEWS ============

@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def variety_list(request):
    try:
        if request.method == 'GET':
            varieties = Variety.objects.all()
            return Response(VarietySerializer(varieties, many=True).data)

        serializer = VarietySerializer(data=request.data)
        if serializer.is_valid():
            variety = serializer.save()
            logger.info(f"Variety {variety.name} created")
            return Response(
                {'id': variety.id, 'message': 'Variety created successfully'},
                status=status.HTTP_201_CREATED
            )
        return Response(
            {'error': 'Invalid data provided', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.error(f"Error handling varieties: {str(e)}")
        return Response(
            {'error': 'Failed to process varieties', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def variety_detail(request, id):
    try:
        variety = Variety.objects.get(id=id)
    except Variety.DoesNotExist:
        return Response({'error': 'Variety not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        if request.method == 'GET':
            return Response(VarietySerializer(variety).data)

        if request.method == 'PUT':
            serializer = VarietySerializer(variety, data=request.data, partial=True)
            if serializer.is_valid():
                serializer.save()
                return Response({'success': True, 'message': 'Variety updated successfully'})
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            variety.delete()
        except (ProtectedError, IntegrityError) as e:
            logger.warning(f"Blocked delete of variety {id}: {str(e)}")
            return Response(
                {'error': blocked_delete_message('variety', e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        return Response({'success': True, 'message': 'Variety deleted successfully'})
    except Exception as e:
        logger.error(f"Error in variety detail for ID {id}: {str(e)}")
        return Response(
            {'error': 'Failed to process variety', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
