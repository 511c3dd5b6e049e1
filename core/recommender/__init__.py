"""
Recommender Module - job recommendations and match feedback.

Public API:
- RecommendationService: ranks active jobs for a job seeker and caches the scores
- FeedbackService: records thumbs up / thumbs down on cached matches
"""

from core.recommender.service import RecommendationService
from core.recommender.feedback import FeedbackService, parse_feedback

__all__ = ['RecommendationService', 'FeedbackService', 'parse_feedback']
