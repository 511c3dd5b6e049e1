#!/usr/bin/env python3
"""
Text Overlap - phrase/word overlap between a profile attribute and job text.

A whole phrase found in the job text earns ``phrase_weight`` points and each
individual word found earns ``word_weight``. The tally is normalized by the
number of words in the attribute:

    score = min(max_score, round(tally / max(1, total_words) * score_multiplier))
"""

import logging

from core.config_loader import ScorerConfig
from core.matcher.models import JobPosting
from core.matcher.tokenizer import TokenizedText
from core.utils import round_half_up, normalize_text

logger = logging.getLogger(__name__)


def build_job_text(job: JobPosting) -> str:
    """All searchable text fields of a posting, lower-cased."""
    parts = [
        job.title,
        job.description,
        job.requirements,
        job.category,
        job.required_skills,
        job.benefits,
        job.company,
    ]
    return " ".join(part or "" for part in parts).lower()


def build_role_text(job: JobPosting, job_text: str) -> str:
    """Title and category followed by the full job text."""
    return f"{normalize_text(job.title)} {normalize_text(job.category)} {job_text}"


def calculate_overlap_tally(tokens: TokenizedText, text: str, config: ScorerConfig) -> int:
    tally = 0
    for phrase in tokens.phrases:
        if phrase in text:
            tally += config.phrase_weight
    for word in tokens.words:
        if word in text:
            tally += config.word_weight
    return tally


def calculate_overlap_score(tokens: TokenizedText, text: str, config: ScorerConfig) -> int:
    """
    Score how much of a tokenized attribute appears in ``text``.

    Args:
        tokens: Phrases and words of the profile attribute
        text: Lower-cased job text to search
        config: ScorerConfig with weights and multiplier

    Returns:
        Integer score in [0, config.max_score]; 0 when nothing overlaps
    """
    if not tokens:
        return 0

    tally = calculate_overlap_tally(tokens, text, config)
    if tally <= 0:
        return 0

    total_words = max(1, len(tokens.words))
    raw = tally / total_words * config.score_multiplier
    return min(config.max_score, round_half_up(raw))
