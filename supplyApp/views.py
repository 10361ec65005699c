from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
import logging

from .models import Supply
from .serializers import SupplySerializer

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def supply_list(request):
    try:
        if request.method == 'GET':
            supplies = Supply.objects.all()
            return Response(SupplySerializer(supplies, many=True).data)

        serializer = SupplySerializer(data=request.data)
        if serializer.is_valid():
            supply = serializer.save()
            logger.info(f"Supply {supply.id} created with status {supply.status}")
            return Response(
                {'id': supply.id, 'message': 'Supply created successfully'},
                status=status.HTTP_201_CREATED
            )
        return Response(
            {'error': 'Invalid data provided', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.error(f"Error handling supplies: {str(e)}")
        return Response(
            {'error': 'Failed to process supplies', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def supply_detail(request, id):
    try:
        supply = Supply.objects.get(id=id)
    except Supply.DoesNotExist:
        return Response({'error': 'Supply not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        if request.method == 'GET':
            return Response(SupplySerializer(supply).data)

        if request.method == 'PUT':
            serializer = SupplySerializer(supply, data=request.data, partial=True)
            if serializer.is_valid():
                supply = serializer.save()
                logger.info(f"Updated supply ID {id}, status {supply.status}")
                return Response({
                    'success': True,
                    'message': 'Supply updated successfully',
                    'status': supply.status
                })
            return Response(
                {'error': 'Invalid data provided', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        supply.delete()
        logger.info(f"Deleted supply ID {id}")
        return Response({'success': True, 'message': 'Supply deleted successfully'})
    except Exception as e:
        logger.error(f"Error in supply detail for ID {id}: {str(e)}")
        return Response(
            {'error': 'Failed to process supply', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
