class RecommendationError(Exception):
    """Base error of the recommendation workflow."""


class RecommendationNotFound(RecommendationError):
    def __init__(self, recommendation_id):
        self.recommendation_id = recommendation_id
        super().__init__(f"Recommendation {recommendation_id} not found")


class RecommendationClosed(RecommendationError):
    """The recommendation already reached a state the requested move cannot leave."""

    def __init__(self, recommendation_id, status):
        self.recommendation_id = recommendation_id
        self.status = status
        super().__init__(f"Recommendation {recommendation_id} is already {status}")
