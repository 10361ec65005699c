from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db import IntegrityError
from django.db.models import ProtectedError
import logging

from backend.utils import blocked_delete_message
from .models import Sensor
from .serializers import SensorSerializer, SensorReadingSerializer

logger = logging.getLogger(__name__)

DEFAULT_READING_LIMIT = 24


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def sensor_list(request):
    try:
        if request.method == 'GET':
            sensors = Sensor.objects.select_related('field').prefetch_related('readings')
            field_id = request.GET.get('field_id')
            if field_id:
                try:
                    sensors = sensors.filter(field_id=int(field_id))
                except ValueError:
                    return Response(
                        {'error': 'Invalid data', 'details': 'field_id must be a valid integer'},
                        status=status.HTTP_400_BAD_REQUEST
                    )
            return Response(SensorSerializer(sensors, many=True).data)

        serializer = SensorSerializer(data=request.data)
        if serializer.is_valid():
            sensor = serializer.save()
            logger.info(f"Sensor {sensor.id} installed on field {sensor.field_id}")
            return Response(
                {'id': sensor.id, 'message': 'Sensor created successfully'},
                status=status.HTTP_201_CREATED
            )
        return Response(
            {'error': 'Invalid data provided', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.error(f"Error handling sensors: {str(e)}")
        return Response(
            {'error': 'Failed to process sensors', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def sensor_detail(request, id):
    try:
        sensor = Sensor.objects.select_related('field').prefetch_related('readings').get(id=id)
    except Sensor.DoesNotExist:
        return Response({'error': 'Sensor not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        if request.method == 'GET':
            return Response(SensorSerializer(sensor).data)

        if request.method == 'PUT':
            serializer = SensorSerializer(sensor, data=request.data, partial=True)
            if serializer.is_valid():
                serializer.save()
                return Response({'success': True, 'message': 'Sensor updated successfully'})
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            sensor.delete()
        except (ProtectedError, IntegrityError) as e:
            logger.warning(f"Blocked delete of sensor {id}: {str(e)}")
            return Response(
                {'error': blocked_delete_message('sensor', e, hint="set the sensor status to 'Inactive'")},
                status=status.HTTP_400_BAD_REQUEST
            )
        logger.info(f"Deleted sensor ID {id}")
        return Response({'success': True, 'message': 'Sensor deleted successfully'})
    except Exception as e:
        logger.error(f"Error in sensor detail for ID {id}: {str(e)}")
        return Response(
            {'error': 'Failed to process sensor', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def sensor_readings(request, id):
    """Latest readings of a sensor (newest first), or record a new one"""
    try:
        sensor = Sensor.objects.get(id=id)
    except Sensor.DoesNotExist:
        return Response({'error': 'Sensor not found'}, status=status.HTTP_404_NOT_FOUND)

    if request.method == 'GET':
        try:
            limit = int(request.GET.get('limit', DEFAULT_READING_LIMIT))
        except (ValueError, TypeError):
            return Response(
                {'error': 'Invalid data', 'details': 'limit must be a valid integer'},
                status=status.HTTP_400_BAD_REQUEST
            )
        readings = sensor.readings.all()[:max(limit, 0)]
        return Response(SensorReadingSerializer(readings, many=True).data)

    if sensor.status != 'Active':
        return Response(
            {'error': 'Inactive sensors cannot record readings'},
            status=status.HTTP_400_BAD_REQUEST
        )

    serializer = SensorReadingSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {'error': 'Invalid data provided', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )
    try:
        reading = serializer.save(sensor=sensor)
    except Exception as e:
        logger.error(f"Error recording reading for sensor {id}: {str(e)}")
        return Response(
            {'error': 'Failed to record reading', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return Response(
        {'id': reading.id, 'message': 'Reading recorded'},
        status=status.HTTP_201_CREATED
    )
