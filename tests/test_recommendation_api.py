"""HTTP contract of the recommendation endpoints."""
from unittest import mock

from django.db import DatabaseError

from recommendationApp.models import Recommendation
from taskApp.models import Task, TaskManager


class TestAcceptEndpoint:
    def test_accept_irrigation_recommendation(self, api_client, recommendation, worker):
        response = api_client.post('/api/recommendations/4/accept', {'actorId': 1}, format='json')

        assert response.status_code == 200
        assert 'message' in response.data

        recommendation.refresh_from_db()
        assert recommendation.status == 'Accepted'
        task = Task.objects.get()
        assert task.description.startswith('[AI RECOMMENDATION]:')
        assert task.field_id == 1
        assert task.status == 'Pending'

    def test_trailing_slash_is_accepted(self, api_client, recommendation, worker):
        response = api_client.post('/api/recommendations/4/accept/', {'actorId': 1}, format='json')

        assert response.status_code == 200

    def test_unknown_recommendation_returns_404(self, api_client, worker):
        response = api_client.post('/api/recommendations/77/accept', {'actorId': 1}, format='json')

        assert response.status_code == 404
        assert Task.objects.count() == 0

    def test_missing_actor_returns_400(self, api_client, recommendation):
        response = api_client.post('/api/recommendations/4/accept', {}, format='json')

        assert response.status_code == 400
        recommendation.refresh_from_db()
        assert recommendation.status == 'Pending'

    def test_unknown_actor_returns_400(self, api_client, recommendation, worker):
        response = api_client.post('/api/recommendations/4/accept', {'actorId': 42}, format='json')

        assert response.status_code == 400
        assert Task.objects.count() == 0

    def test_store_failure_rolls_back_and_passes_message_through(self, api_client, recommendation, worker):
        with mock.patch.object(TaskManager, 'create_derived', side_effect=DatabaseError('insert failed')):
            response = api_client.post('/api/recommendations/4/accept', {'actorId': 1}, format='json')

        assert response.status_code == 500
        assert response.data['error'] == 'insert failed'
        recommendation.refresh_from_db()
        assert recommendation.status == 'Pending'
        assert Task.objects.count() == 0

    def test_rejected_recommendation_returns_409(self, api_client, recommendation, worker):
        Recommendation.objects.filter(id=4).update(status='Rejected')

        response = api_client.post('/api/recommendations/4/accept', {'actorId': 1}, format='json')

        assert response.status_code == 409


class TestRejectEndpoint:
    def test_reject_then_reject_again(self, api_client, recommendation):
        first = api_client.post('/api/recommendations/4/reject')
        second = api_client.post('/api/recommendations/4/reject')

        assert first.status_code == 200
        assert second.status_code == 409
        recommendation.refresh_from_db()
        assert recommendation.status == 'Rejected'

    def test_unknown_recommendation_returns_404(self, api_client, db):
        response = api_client.post('/api/recommendations/9/reject/')

        assert response.status_code == 404


class TestRecommendationList:
    def test_list_includes_field_name(self, api_client, recommendation):
        response = api_client.get('/api/recommendations/')

        assert response.status_code == 200
        assert len(response.data) == 1
        row = response.data[0]
        assert row['id'] == 4
        assert row['field_id'] == 1
        assert row['field_name'] == 'North Plot'
        assert row['status'] == 'Pending'

    def test_filter_by_status(self, api_client, recommendation):
        response = api_client.get('/api/recommendations/', {'status': 'Accepted'})

        assert response.status_code == 200
        assert response.data == []

    def test_detail_not_found(self, api_client, db):
        response = api_client.get('/api/recommendations/5/')

        assert response.status_code == 404
