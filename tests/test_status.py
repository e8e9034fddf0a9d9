"""Tests for provider status normalization."""

import pytest

from smarthub_tips.data import (
    MatchStatus,
    SportType,
    normalize_basketball_status,
    normalize_football_status,
    normalize_status,
)


class TestFootballStatus:
    """Tests for API-Football status codes."""

    @pytest.mark.parametrize("code", ["1H", "2H", "HT", "ET", "P", "LIVE"])
    def test_live_codes(self, code):
        assert normalize_football_status(code) == MatchStatus.LIVE

    @pytest.mark.parametrize("code", ["FT", "AET", "PEN", "PST", "CANC", "ABD", "AWD", "WO"])
    def test_finished_codes(self, code):
        assert normalize_football_status(code) == MatchStatus.FINISHED

    @pytest.mark.parametrize("code", ["NS", "TBD", "SUSP", "INT", "Q1", "", None, "ft"])
    def test_other_codes_are_scheduled(self, code):
        """Unknown or missing codes should fall back to scheduled."""
        assert normalize_football_status(code) == MatchStatus.SCHEDULED


class TestBasketballStatus:
    """Tests for API-Basketball status codes."""

    @pytest.mark.parametrize("code", ["Q1", "Q2", "Q3", "Q4", "OT", "BT", "HT", "LIVE"])
    def test_live_codes(self, code):
        assert normalize_basketball_status(code) == MatchStatus.LIVE

    @pytest.mark.parametrize("code", ["FT", "AOT", "CANC", "POST"])
    def test_finished_codes(self, code):
        assert normalize_basketball_status(code) == MatchStatus.FINISHED

    @pytest.mark.parametrize("code", ["NS", "SUSP", "AWD", "1H", "PEN", None])
    def test_other_codes_are_scheduled(self, code):
        assert normalize_basketball_status(code) == MatchStatus.SCHEDULED


class TestNormalizeStatus:
    """Tests for sport dispatch."""

    def test_dispatches_on_sport(self):
        # PST is finished for football, unknown for basketball
        assert normalize_status(SportType.FOOTBALL, "PST") == MatchStatus.FINISHED
        assert normalize_status(SportType.NBA, "PST") == MatchStatus.SCHEDULED

    def test_accepts_sport_strings(self):
        assert normalize_status("nba", "Q4") == MatchStatus.LIVE
        assert normalize_status("football", "2H") == MatchStatus.LIVE
