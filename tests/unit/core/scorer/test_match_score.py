#!/usr/bin/env python3
"""
Test suite for pairwise profile/job scoring.
"""

import unittest

from core.config_loader import ScorerConfig
from core.scorer.match_score import score_profile_against_job, calculate_match_score
from core.scorer.models import MatchScores
from core.utils import round_half_up
from tests.fixtures.matching_fixtures import make_profile, make_job, frontend_job, driver_job


class TestPairwiseScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_full_skill_overlap_scores_100(self):
        profile = make_profile(skills="Web Development, JavaScript, React")
        job = make_job(required_skills="Web Development, JavaScript, React, HTML, CSS")

        scores = score_profile_against_job(profile, job, self.config)

        self.assertEqual(scores.skill_match, 100)

    def test_strong_match_on_both_attributes(self):
        scores = score_profile_against_job(make_profile(), frontend_job(), self.config)

        self.assertEqual(scores, MatchScores(match_score=100, skill_match=100, location_match=0, role_match=100))

    def test_partial_skill_match_blends_with_role(self):
        profile = make_profile(
            skills="Customer Service, Cooking, Food Safety, Inventory Management",
            desired_roles="Cashier",
        )
        job = make_job(title="Cashier", description="Friendly customer support at the counter.")

        scores = score_profile_against_job(profile, job, self.config)

        self.assertEqual(scores.skill_match, 43)
        self.assertEqual(scores.role_match, 100)
        # 43 * 0.5 + 100 * 0.5 = 71.5
        self.assertEqual(scores.match_score, 72)

    def test_empty_profile_scores_zero(self):
        profile = make_profile(skills="", desired_roles=None)

        scores = score_profile_against_job(profile, frontend_job(), self.config)

        self.assertEqual(scores, MatchScores.zero())

    def test_unrelated_job_scores_zero(self):
        scores = score_profile_against_job(make_profile(), driver_job(), self.config)

        self.assertEqual(scores.match_score, 0)

    def test_location_match_is_never_computed(self):
        profile = make_profile(preferred_location="Pili")
        for job in (frontend_job(location="Pili"), driver_job(location="Pili")):
            self.assertEqual(score_profile_against_job(profile, job, self.config).location_match, 0)

    def test_match_score_is_blend_of_rounded_subscores(self):
        profiles = [
            make_profile(skills="JavaScript", desired_roles="Driver"),
            make_profile(skills="Navigation, Cooking, Baking", desired_roles="Frontend Developer, Cook"),
            make_profile(skills="React, Node", desired_roles="Delivery"),
        ]
        jobs = [frontend_job(), driver_job()]

        for profile in profiles:
            for job in jobs:
                scores = score_profile_against_job(profile, job, self.config)
                expected = round_half_up(scores.skill_match * 0.5 + scores.role_match * 0.5)
                self.assertEqual(scores.match_score, expected)
                for value in (scores.match_score, scores.skill_match, scores.role_match, scores.location_match):
                    self.assertGreaterEqual(value, 0)
                    self.assertLessEqual(value, 100)

    def test_role_match_searches_whole_job_text(self):
        # "logistics" only appears in the category, "freight" only in the company
        profile = make_profile(skills="", desired_roles="Logistics, Freight")

        scores = score_profile_against_job(profile, driver_job(), self.config)

        self.assertEqual(scores.role_match, 100)
        self.assertEqual(scores.match_score, 50)


class TestCalculateMatchScore(unittest.TestCase):

    def test_half_points_round_up(self):
        config = ScorerConfig()

        # 41 * 0.5 + 100 * 0.5 = 70.5, which round() would take to 70
        self.assertEqual(calculate_match_score(41, 100, config), 71)

    def test_weights_are_configurable(self):
        config = ScorerConfig(skill_weight=1.0, role_weight=0.0)

        self.assertEqual(calculate_match_score(40, 100, config), 40)


if __name__ == '__main__':
    unittest.main()
