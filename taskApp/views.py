from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
import logging

from .models import Task
from .serializers import TaskSerializer, TaskWriteSerializer, TaskStatusSerializer

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def task_list(request):
    """List tasks with their field name, or schedule a new task"""
    if request.method == 'GET':
        try:
            tasks = Task.objects.select_related('field').all()
            return Response(TaskSerializer(tasks, many=True).data)
        except Exception as e:
            logger.error(f"Error listing tasks: {str(e)}")
            return Response(
                {'error': 'Failed to fetch tasks', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

    serializer = TaskWriteSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Task validation error: {serializer.errors}")
        return Response(
            {'error': 'Invalid data provided', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        task = Task.objects.register(**serializer.validated_data)
    except ValidationError as e:
        return Response(
            {'error': 'Invalid data provided', 'details': e.messages},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.error(f"Error creating task: {str(e)}")
        return Response(
            {'error': 'Database error', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    logger.info(f"Task {task.id} scheduled on field {task.field_id} for worker {task.assignee_id}")
    return Response(
        {'success': True, 'id': task.id, 'message': 'Task created successfully'},
        status=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def task_detail(request, id):
    try:
        task = Task.objects.select_related('field').get(id=id)
    except Task.DoesNotExist:
        return Response({'error': 'Task not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        if request.method == 'GET':
            return Response(TaskSerializer(task).data)

        if request.method == 'PUT':
            serializer = TaskWriteSerializer(task, data=request.data, partial=True)
            if serializer.is_valid():
                serializer.save()
                logger.info(f"Updated task ID {id}")
                return Response({'success': True, 'message': 'Task updated successfully'})
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        task.delete()
        logger.info(f"Deleted task ID {id}")
        return Response({'success': True, 'message': 'Task deleted successfully'})
    except Exception as e:
        logger.error(f"Error in task detail for ID {id}: {str(e)}")
        return Response(
            {'error': 'Failed to process task', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['PATCH'])
@permission_classes([AllowAny])
def update_task_status(request, id):
    """Change only the status of a task"""
    serializer = TaskStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {'error': 'Invalid status', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        updated = Task.objects.filter(id=id).update(status=serializer.validated_data['status'])
    except Exception as e:
        logger.error(f"Error updating status of task {id}: {str(e)}")
        return Response(
            {'error': 'Failed to update task status', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if updated == 0:
        return Response({'error': 'Task not found'}, status=status.HTTP_404_NOT_FOUND)

    logger.info(f"Task {id} moved to {serializer.validated_data['status']}")
    return Response({'success': True, 'message': 'Status updated successfully'})
