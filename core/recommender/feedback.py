#!/usr/bin/env python3
"""
Feedback Service - records thumbs up / thumbs down on a cached match.
"""

import logging
from typing import Union

from core.exceptions import InvalidFeedbackError
from core.interfaces import MatchRecordRepository
from core.matcher.models import MatchFeedback

logger = logging.getLogger(__name__)


def parse_feedback(feedback: Union[MatchFeedback, str]) -> MatchFeedback:
    """Return ``feedback`` as a MatchFeedback or raise InvalidFeedbackError."""
    if isinstance(feedback, MatchFeedback):
        return feedback
    try:
        return MatchFeedback(feedback)
    except ValueError:
        allowed = ", ".join(f.value for f in MatchFeedback)
        raise InvalidFeedbackError(f"Invalid feedback {feedback!r}; expected one of: {allowed}")


class FeedbackService:
    """Attaches user feedback to existing match records."""

    def __init__(self, matches: MatchRecordRepository):
        self.matches = matches

    def record_feedback(
        self,
        user_id: int,
        job_id: int,
        feedback: Union[MatchFeedback, str]
    ) -> bool:
        """
        Set the feedback on the (user_id, job_id) match record.

        Args:
            user_id: Job seeker giving the feedback
            job_id: Job the feedback is about
            feedback: MatchFeedback or its string value

        Returns:
            True if a record was updated, False if none exists (no record is created)

        Raises:
            InvalidFeedbackError: If feedback is not thumbs_up or thumbs_down
        """
        value = parse_feedback(feedback)

        updated = self.matches.update_feedback(user_id, job_id, value)
        if updated:
            logger.info(f"Recorded {value.value} for user {user_id}, job {job_id}")
        else:
            logger.info(f"No match record for user {user_id}, job {job_id}; feedback ignored")
        return updated
