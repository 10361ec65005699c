from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
import logging

from . import services
from .exceptions import RecommendationClosed, RecommendationNotFound
from .models import Recommendation
from .serializers import RecommendationSerializer, AcceptRecommendationSerializer

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def recommendation_list(request):
    """Recommendations with their field name, newest first"""
    try:
        recommendations = Recommendation.objects.select_related('field').all()
        status_filter = request.GET.get('status')
        if status_filter:
            recommendations = recommendations.filter(status=status_filter)
        serializer = RecommendationSerializer(recommendations, many=True)
        return Response(serializer.data)
    except Exception as e:
        logger.error(f"Error listing recommendations: {str(e)}")
        return Response(
            {'error': 'Database error', 'details': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET'])
@permission_classes([AllowAny])
def recommendation_detail(request, recommendation_id):
    try:
        recommendation = Recommendation.objects.select_related('field').get(id=recommendation_id)
    except Recommendation.DoesNotExist:
        return Response({'error': 'Recommendation not found'}, status=status.HTTP_404_NOT_FOUND)
    return Response(RecommendationSerializer(recommendation).data)


@api_view(['POST'])
@permission_classes([AllowAny])
def accept_recommendation(request, recommendation_id):
    """
    Accept a recommendation and create the task derived from it.

    Both writes happen in one transaction; on failure nothing is written and
    the underlying error message is returned.
    """
    serializer = AcceptRecommendationSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Invalid accept request for recommendation {recommendation_id}: {serializer.errors}")
        return Response(
            {'error': 'A valid actorId is required', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )

    actor = serializer.validated_data['actorId']
    try:
        services.accept_recommendation(recommendation_id, actor.id)
    except RecommendationNotFound as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except RecommendationClosed as e:
        logger.warning(str(e))
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except Exception as e:
        logger.error(f"Accepting recommendation {recommendation_id} rolled back: {str(e)}")
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(
        {'message': 'Recommendation accepted and task created successfully'},
        status=status.HTTP_200_OK
    )


@api_view(['POST'])
@permission_classes([AllowAny])
def reject_recommendation(request, recommendation_id):
    try:
        services.reject_recommendation(recommendation_id)
    except RecommendationNotFound as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except RecommendationClosed as e:
        logger.warning(str(e))
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except Exception as e:
        logger.error(f"Error rejecting recommendation {recommendation_id}: {str(e)}")
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({'message': 'Recommendation rejected'}, status=status.HTTP_200_OK)
