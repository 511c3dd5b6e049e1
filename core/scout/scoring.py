#!/usr/bin/env python3
"""
Candidate Scoring - how well a job seeker covers an employer's skill search.

For each requested skill:
- every candidate skill phrase containing it (or contained by it) earns skill_points
- every desired-role phrase containing it (or contained by it) earns role_points
- if neither matched, the skill appearing anywhere in the candidate's text earns text_points

    skill_match_score = min(100, round(total / (len(requested) * 3) * 100))

forced to 100 once at least as many distinct phrases matched as skills were
requested. An exact experience level match adds experience_bonus.
"""

import logging
from typing import List, Optional, Tuple

from core.config_loader import ScoutConfig
from core.matcher.models import JobSeekerProfile
from core.matcher.tokenizer import split_phrases
from core.scout.models import CandidateMatch
from core.utils import round_half_up, normalize_text

logger = logging.getLogger(__name__)


def _contains_either_way(a: str, b: str) -> bool:
    return a in b or b in a


def find_matching_skills(
    requested_skills: List[str],
    profile: JobSeekerProfile,
    config: ScoutConfig
) -> Tuple[List[str], int]:
    """
    Match requested skills against a candidate's skills and desired roles.

    Args:
        requested_skills: Lower-cased, trimmed skills from the search; blank
            entries match nothing but still count towards the requested total
        profile: Candidate profile
        config: ScoutConfig with point values

    Returns:
        (matched phrases in first-seen order without duplicates, total points)
    """
    skill_phrases = split_phrases(profile.skills)
    role_phrases = split_phrases(profile.desired_roles)
    candidate_text = f"{normalize_text(profile.skills)} {normalize_text(profile.desired_roles)}"

    matched: List[str] = []
    total = 0

    def record(phrase: str) -> None:
        if phrase not in matched:
            matched.append(phrase)

    for wanted in requested_skills:
        if not wanted:
            continue
        found = False

        for phrase in skill_phrases:
            if _contains_either_way(phrase, wanted):
                record(phrase)
                total += config.skill_points
                found = True

        for phrase in role_phrases:
            if _contains_either_way(phrase, wanted):
                record(phrase)
                total += config.role_points
                found = True

        if not found and wanted in candidate_text:
            record(wanted)
            total += config.text_points

    return matched, total


def calculate_skill_match_score(
    matched: List[str],
    total: int,
    requested_count: int,
    config: ScoutConfig
) -> int:
    if not matched or requested_count <= 0:
        return 0
    if len(matched) >= requested_count:
        return config.max_score
    ratio = total / (requested_count * config.skill_points)
    return min(config.max_score, round_half_up(ratio * 100))


def score_candidate(
    profile: JobSeekerProfile,
    requested_skills: List[str],
    config: ScoutConfig,
    experience_level: Optional[str] = None
) -> CandidateMatch:
    """Score one candidate against normalized requested skills."""
    matched, total = find_matching_skills(requested_skills, profile, config)
    skill_score = calculate_skill_match_score(matched, total, len(requested_skills), config)

    bonus = 0
    if experience_level and profile.experience_level == experience_level:
        bonus = config.experience_bonus

    return CandidateMatch(
        profile=profile,
        match_score=min(config.max_score, skill_score + bonus),
        matching_skills=matched,
        skill_match_score=skill_score,
        experience_bonus=bonus,
    )
