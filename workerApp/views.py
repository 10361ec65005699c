from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db import IntegrityError
from django.db.models import ProtectedError
import logging

from backend.utils import blocked_delete_message
from .models import Worker
from .serializers import WorkerSerializer

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def worker_list(request):
    try:
        if request.method == 'GET':
            workers = Worker.objects.all()
            return Response(WorkerSerializer(workers, many=True).data)

        serializer = WorkerSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Worker validation error: {serializer.errors}")
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )
        worker = Worker.objects.register(**serializer.validated_data)
        logger.info(f"Worker {worker.id} registered as {worker.role}")
        return Response(
            {'id': worker.id, 'message': 'Worker created successfully'},
            status=status.HTTP_201_CREATED
        )
    except Exception as e:
        logger.error(f"Error handling workers: {str(e)}")
        return Response(
            {'error': 'Failed to process workers', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def worker_detail(request, id):
    try:
        worker = Worker.objects.get(id=id)
    except Worker.DoesNotExist:
        return Response({'error': 'No worker found with that ID'}, status=status.HTTP_404_NOT_FOUND)

    try:
        if request.method == 'GET':
            return Response(WorkerSerializer(worker).data)

        if request.method == 'PUT':
            serializer = WorkerSerializer(worker, data=request.data, partial=True)
            if serializer.is_valid():
                serializer.save()
                logger.info(f"Updated worker ID {id}")
                return Response({'success': True, 'message': 'Worker updated successfully'})
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            worker.delete()
        except (ProtectedError, IntegrityError) as e:
            logger.warning(f"Blocked delete of worker {id}: {str(e)}")
            return Response(
                {'error': blocked_delete_message('worker', e, hint='reassign their tasks')},
                status=status.HTTP_400_BAD_REQUEST
            )
        logger.info(f"Deleted worker ID {id}")
        return Response({'success': True, 'message': 'Worker deleted successfully'})
    except Exception as e:
        logger.error(f"Error in worker detail for ID {id}: {str(e)}")
        return Response(
            {'error': 'Internal server error', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
