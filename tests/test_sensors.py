from django.db import connection
from django.test.utils import CaptureQueriesContext

from sensorApp.models import Sensor, SensorReading


class TestSensors:
    def test_list_filtered_by_field(self, api_client, sensor, empty_field):
        response = api_client.get('/api/sensors/', {'field_id': empty_field.id})

        assert response.status_code == 200
        assert response.data == []

    def test_record_and_read_readings(self, api_client, sensor):
        first = api_client.post(f'/api/sensors/{sensor.id}/readings/', {'value': 61.5}, format='json')
        api_client.post(f'/api/sensors/{sensor.id}/readings/', {'value': 63.0}, format='json')

        response = api_client.get(f'/api/sensors/{sensor.id}/readings/', {'limit': 1})

        assert first.status_code == 201
        assert len(response.data) == 1
        assert SensorReading.objects.filter(sensor=sensor).count() == 2

    def test_inactive_sensor_rejects_readings(self, api_client, sensor):
        sensor.status = 'Inactive'
        sensor.save()

        response = api_client.post(f'/api/sensors/{sensor.id}/readings/', {'value': 1.0}, format='json')

        assert response.status_code == 400

    def test_sensor_with_readings_cannot_be_deleted(self, api_client, sensor):
        SensorReading.objects.create(sensor=sensor, value=20.1)

        response = api_client.delete(f'/api/sensors/{sensor.id}/')

        assert response.status_code == 400
        assert 'readings' in response.data['error']

    def test_detail_shows_last_reading(self, api_client, sensor):
        SensorReading.objects.create(sensor=sensor, value=20.1)

        response = api_client.get(f'/api/sensors/{sensor.id}/')

        assert response.data['last_reading']['value'] == 20.1

    def test_non_numeric_field_filter_returns_400(self, api_client, sensor):
        response = api_client.get('/api/sensors/', {'field_id': 'abc'})

        assert response.status_code == 400
        assert 'field_id' in response.data['details']

    def test_list_query_count_does_not_grow_with_sensors(self, api_client, sensor, field):
        SensorReading.objects.create(sensor=sensor, value=20.1)
        with CaptureQueriesContext(connection) as single:
            api_client.get('/api/sensors/')

        for kind in ('pH', 'Wind', 'Temperature'):
            extra = Sensor.objects.create(kind=kind, field=field)
            SensorReading.objects.create(sensor=extra, value=7.0)
        with CaptureQueriesContext(connection) as several:
            response = api_client.get('/api/sensors/')

        assert len(response.data) == 4
        assert all(row['last_reading'] is not None for row in response.data)
        assert len(several.captured_queries) == len(single.captured_queries)
