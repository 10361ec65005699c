"""Shared fixtures: API client plus a small farm with one field of each kind."""
from datetime import date, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from farmApp.models import Farm, Field, Variety
from plantingApp.models import Planting
from recommendationApp.models import Recommendation
from sensorApp.models import Sensor
from taskApp.models import Task
from workerApp.models import Worker


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def farm(db):
    return Farm.objects.create(id=1, name='El Sol', location='Valle Central', owner='Finca El Sol S.A.')


@pytest.fixture
def field(farm):
    return Field.objects.create(id=1, name='North Plot', area_ha=Decimal('2.50'), farm=farm)


@pytest.fixture
def empty_field(farm):
    return Field.objects.create(id=2, name='South Plot', area_ha=Decimal('1.25'), farm=farm)


@pytest.fixture
def variety(db):
    return Variety.objects.create(name='Caturra', description='Dwarf arabica')


@pytest.fixture
def worker(db):
    return Worker.objects.create(id=1, name='Ana Rojas', role='Administrator', contact='ana@example.com')


@pytest.fixture
def planting(field, variety):
    return Planting.objects.create(
        date=date(2024, 1, 15),
        plant_count=400,
        field=field,
        variety=variety
    )


@pytest.fixture
def sensor(field):
    return Sensor.objects.create(kind='Humidity', location='North corner', field=field)


@pytest.fixture
def pending_task(field, worker):
    return Task.objects.create(
        description='Weed the rows',
        scheduled_date=timezone.now() + timedelta(days=1),
        field=field,
        assignee=worker
    )


@pytest.fixture
def recommendation(field):
    return Recommendation.objects.create(
        id=4,
        description='Adjust irrigation: excess moisture',
        status=Recommendation.STATUS_PENDING,
        field=field
    )
