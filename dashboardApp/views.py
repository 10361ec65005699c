from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db.models import Count, F, Sum
from django.db.models.functions import ExtractMonth, ExtractYear
from django.utils import timezone
import logging

from harvestApp.models import Harvest
from plantingApp.models import Planting
from workerApp.models import Worker

logger = logging.getLogger(__name__)


def parse_year(request):
    """Year from the query string, defaulting to the current one."""
    raw = request.GET.get('year')
    if raw in (None, ''):
        return timezone.localdate().year
    year = int(raw)
    if year < 1900 or year > 9999:
        raise ValueError(f"Year {year} is out of range")
    return year


def invalid_year_response(e):
    return Response(
        {'error': 'Invalid data', 'details': f"year must be a valid year ({str(e)})"},
        status=status.HTTP_400_BAD_REQUEST
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def dashboard_stats(request):
    """Production total for the year, plants in the ground and worker head count."""
    try:
        year = parse_year(request)
    except ValueError as e:
        return invalid_year_response(e)

    try:
        production = Harvest.objects.filter(date__year=year).aggregate(total=Sum('quantity_kg'))['total']
        plants = Planting.objects.aggregate(total=Sum('plant_count'))['total']
        workers = Worker.objects.count()

        summary = {
            'year': year,
            'total_production_kg': float(production or 0),
            'active_plants': plants or 0,
            'worker_count': workers
        }
        logger.info(f"Generated dashboard stats for {year}")
        return Response(summary, status=status.HTTP_200_OK)
    except Exception as e:
        logger.error(f"Error generating dashboard stats: {str(e)}")
        return Response({
            'error': 'An error occurred while generating dashboard stats',
            'details': str(e)
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
@permission_classes([AllowAny])
def monthly_production(request):
    """Harvested kilograms per month of the year; months without harvests are left out."""
    try:
        year = parse_year(request)
    except ValueError as e:
        return invalid_year_response(e)

    try:
        rows = (
            Harvest.objects.filter(date__year=year)
            .annotate(month=ExtractMonth('date'))
            .values('month')
            .annotate(total_kg=Sum('quantity_kg'))
            .order_by('month')
        )
        data = [{'month': row['month'], 'total_kg': float(row['total_kg'] or 0)} for row in rows]
        return Response(data)
    except Exception as e:
        logger.error(f"Error generating monthly production for {year}: {str(e)}")
        return Response({
            'error': 'An error occurred while generating monthly production',
            'details': str(e)
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
@permission_classes([AllowAny])
def annual_summary(request):
    try:
        rows = (
            Harvest.objects
            .annotate(year=ExtractYear('date'), variety=F('planting__variety__name'))
            .values('year', 'variety')
            .annotate(total_kg=Sum('quantity_kg'), harvest_count=Count('id'))
            .order_by('-year', 'variety')
        )
        data = [
            {
                'year': row['year'],
                'variety': row['variety'],
                'total_kg': float(row['total_kg'] or 0),
                'harvest_count': row['harvest_count']
            }
            for row in rows
        ]
        return Response(data)
    except Exception as e:
        logger.error(f"Error generating annual summary: {str(e)}")
        return Response({
            'error': 'An error occurred while generating the annual summary',
            'details': str(e)
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
