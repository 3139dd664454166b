"""
Unit tests for domain models.
"""

import pytest
from datetime import datetime

from folderstats.domain.exceptions import ConfigurationError
from folderstats.domain.models import StatsCommand, StatsCommandType


class TestStatsCommandType:
    """Test StatsCommandType parsing."""

    @pytest.mark.parametrize("name", ["word_count", "WORD_COUNT", " Word_Count "])
    def test_parse_value_or_name(self, name):
        assert StatsCommandType.parse(name) is StatsCommandType.WORD_COUNT

    def test_parse_member_passthrough(self):
        assert StatsCommandType.parse(StatsCommandType.AVERAGE_WORD_LENGTH) is StatsCommandType.AVERAGE_WORD_LENGTH

    def test_parse_unknown(self):
        with pytest.raises(ConfigurationError, match="valid: scan_most_popular_word"):
            StatsCommandType.parse("median")


class TestStatsCommand:
    """Test StatsCommand record."""

    def test_to_dict(self):
        record = StatsCommand(
            command="word_count",
            folder_name="A",
            results=["total_words: 4"],
            processed_date=datetime(2026, 1, 2, 3, 4, 5)
        )

        assert record.to_dict() == {
            "command": "word_count",
            "folder_name": "A",
            "results": ["total_words: 4"],
            "processed_date": "2026-01-02T03:04:05",
        }

    def test_from_dict_defaults_results(self):
        record = StatsCommand.from_dict({
            "command": "word_count",
            "folder_name": "A",
            "processed_date": "2026-01-02T03:04:05",
        })

        assert record.results == []
        assert record.processed_date == datetime(2026, 1, 2, 3, 4, 5)

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            StatsCommand.from_dict({"command": "word_count"})

    def test_is_same_month(self):
        record = StatsCommand(command="c", folder_name="A", processed_date=datetime(2026, 5, 31, 23, 59))

        assert record.is_same_month(datetime(2026, 5, 1))
        assert not record.is_same_month(datetime(2026, 6, 1))
        assert not record.is_same_month(datetime(2025, 5, 31))
