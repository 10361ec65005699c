"""
Recommendation workflow.

Accepting a recommendation marks it Accepted and inserts the task derived from
it inside one transaction on the database named by ``using``: both rows are
written or neither is.
"""
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from taskApp.models import Task
from .exceptions import RecommendationClosed, RecommendationNotFound
from .models import Recommendation

logger = logging.getLogger(__name__)

DERIVED_TASK_PREFIX = '[AI RECOMMENDATION]: '


def derived_task_description(recommendation):
    return f"{DERIVED_TASK_PREFIX}{recommendation.description}"


def _get_recommendation(recommendation_id, using):
    try:
        return Recommendation.objects.using(using).get(id=recommendation_id)
    except Recommendation.DoesNotExist:
        raise RecommendationNotFound(recommendation_id) from None


def accept_recommendation(recommendation_id, actor_id, using=DEFAULT_DB_ALIAS):
    """
    Accept a recommendation and create its derived task.

    Raises RecommendationNotFound for an unknown id and RecommendationClosed for
    a rejected recommendation. Any other error rolls the transaction back and
    propagates unchanged.

    An already accepted recommendation is accepted again and gets a second
    task; repeated calls are not idempotent.
    """
    with transaction.atomic(using=using):
        recommendation = _get_recommendation(recommendation_id, using)
        if recommendation.status == Recommendation.STATUS_REJECTED:
            raise RecommendationClosed(recommendation_id, recommendation.status)

        Recommendation.objects.using(using).filter(id=recommendation.id).update(
            status=Recommendation.STATUS_ACCEPTED
        )
        task = Task.objects.db_manager(using).create_derived(
            description=derived_task_description(recommendation),
            field_id=recommendation.field_id,
            assignee_id=actor_id
        )

    logger.info(
        f"Recommendation {recommendation_id} accepted by worker {actor_id}, "
        f"task {task.id} created on field {task.field_id}"
    )
    return task


def reject_recommendation(recommendation_id, using=DEFAULT_DB_ALIAS):
    """Reject a pending recommendation. Accepted and rejected ones are final."""
    with transaction.atomic(using=using):
        recommendation = _get_recommendation(recommendation_id, using)
        if recommendation.is_closed:
            raise RecommendationClosed(recommendation_id, recommendation.status)

        Recommendation.objects.using(using).filter(id=recommendation.id).update(
            status=Recommendation.STATUS_REJECTED
        )
        recommendation.status = Recommendation.STATUS_REJECTED

    logger.info(f"Recommendation {recommendation_id} rejected")
    return recommendation
