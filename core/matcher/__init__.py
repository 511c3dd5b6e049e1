"""
Matcher Module - value types and text tokenization shared by the scorers.

Public API:
- JobSeekerProfile, JobPosting, MatchRecord, MatchFeedback: domain value types
- tokenize, split_phrases: free-text normalization
"""

from core.matcher.models import (
    JOBSEEKER_ROLE,
    JobSeekerProfile,
    JobPosting,
    MatchRecord,
    MatchFeedback,
)
from core.matcher.tokenizer import TokenizedText, tokenize, split_phrases

__all__ = [
    'JOBSEEKER_ROLE',
    'JobSeekerProfile',
    'JobPosting',
    'MatchRecord',
    'MatchFeedback',
    'TokenizedText',
    'tokenize',
    'split_phrases',
]
