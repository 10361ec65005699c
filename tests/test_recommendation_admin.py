"""Bulk accept and reject actions on the recommendation admin."""
import pytest
from django.contrib import admin, messages
from django.contrib.messages.storage.cookie import CookieStorage
from django.test import RequestFactory

from recommendationApp.admin import RecommendationAdmin, accept_selected, reject_selected
from recommendationApp.models import Recommendation
from taskApp.models import Task
from workerApp.models import Worker


@pytest.fixture
def model_admin():
    return RecommendationAdmin(Recommendation, admin.site)


@pytest.fixture
def admin_request():
    request = RequestFactory().post('/admin/recommendationApp/recommendation/')
    request._messages = CookieStorage(request)
    return request


@pytest.fixture
def technician(db):
    return Worker.objects.create(id=2, name='Luis Mora', role='Technician')


def sent_messages(request):
    return [(message.level, message.message) for message in request._messages]


class TestAcceptSelected:
    def test_task_goes_to_the_suggested_assignee(self, model_admin, admin_request, recommendation, worker, technician):
        recommendation.assignee = technician
        recommendation.save()

        accept_selected(model_admin, admin_request, Recommendation.objects.all())

        recommendation.refresh_from_db()
        assert recommendation.status == Recommendation.STATUS_ACCEPTED
        assert Task.objects.get().assignee_id == technician.id
        assert sent_messages(admin_request) == [
            (messages.INFO, 'Successfully accepted 1 recommendations.')
        ]

    def test_without_assignee_falls_back_to_an_administrator(self, model_admin, admin_request, recommendation, worker):
        accept_selected(model_admin, admin_request, Recommendation.objects.all())

        recommendation.refresh_from_db()
        assert recommendation.status == Recommendation.STATUS_ACCEPTED
        assert Task.objects.get().assignee_id == worker.id

    def test_without_assignee_or_administrator_warns_and_skips(self, model_admin, admin_request, recommendation, technician):
        accept_selected(model_admin, admin_request, Recommendation.objects.all())

        recommendation.refresh_from_db()
        assert recommendation.status == Recommendation.STATUS_PENDING
        assert not Task.objects.exists()
        assert sent_messages(admin_request) == [
            (messages.WARNING, f'Recommendation #{recommendation.id} has no assignee and no administrator exists.'),
            (messages.INFO, 'Successfully accepted 0 recommendations.'),
        ]

    def test_closed_recommendations_are_skipped(self, model_admin, admin_request, field, worker):
        Recommendation.objects.create(description='Prune', status=Recommendation.STATUS_ACCEPTED, field=field)
        Recommendation.objects.create(description='Lime', status=Recommendation.STATUS_REJECTED, field=field)

        accept_selected(model_admin, admin_request, Recommendation.objects.all())

        assert not Task.objects.exists()
        assert Recommendation.objects.filter(status=Recommendation.STATUS_ACCEPTED).count() == 1
        assert Recommendation.objects.filter(status=Recommendation.STATUS_REJECTED).count() == 1
        assert sent_messages(admin_request) == [
            (messages.INFO, 'Successfully accepted 0 recommendations.')
        ]


class TestRejectSelected:
    def test_rejects_only_pending(self, model_admin, admin_request, recommendation, field):
        accepted = Recommendation.objects.create(
            description='Prune', status=Recommendation.STATUS_ACCEPTED, field=field
        )

        reject_selected(model_admin, admin_request, Recommendation.objects.all())

        recommendation.refresh_from_db()
        accepted.refresh_from_db()
        assert recommendation.status == Recommendation.STATUS_REJECTED
        assert accepted.status == Recommendation.STATUS_ACCEPTED
        assert sent_messages(admin_request) == [
            (messages.INFO, 'Successfully rejected 1 recommendations.')
        ]
