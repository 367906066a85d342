from api.routes.feedback import FeedbackController, HealthController
from api.routes.match import MatchController

__all__ = ["FeedbackController", "HealthController", "MatchController"]
