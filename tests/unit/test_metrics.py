"""Test metrics collector."""

import pytest
import time

from folderstats.shared.metrics import MetricsCollector


def test_metrics_timer():
    """Test timer functionality."""
    metrics = MetricsCollector()

    metrics.start_timer('batch')
    time.sleep(0.05)
    elapsed = metrics.stop_timer('batch')

    assert elapsed >= 0.05
    assert len(metrics.get_metric('batch_duration')) == 1


def test_stop_unknown_timer():
    """Stopping a timer that never started is an error."""
    with pytest.raises(KeyError):
        MetricsCollector().stop_timer('missing')


def test_metrics_counter():
    """Test counter functionality."""
    metrics = MetricsCollector()

    metrics.increment_counter('commands_executed')
    metrics.increment_counter('commands_executed')
    metrics.increment_counter('commands_executed', amount=3)

    assert metrics.get_counter('commands_executed') == 5
    assert metrics.get_counter('never') == 0


def test_metrics_summary():
    """Test summary generation."""
    metrics = MetricsCollector()

    metrics.record_metric('words', 30.0)
    metrics.record_metric('words', 29.5)
    metrics.record_metric('words', 30.5)
    metrics.record_metric('labels', 'a')

    summary = metrics.get_summary()

    assert summary['metrics']['words']['count'] == 3
    assert summary['metrics']['words']['avg'] == 30.0
    assert summary['metrics']['labels'] == {'count': 1, 'values': ['a']}


def test_format_summary_lines():
    metrics = MetricsCollector()
    metrics.increment_counter('folders_processed', 2)
    metrics.record_metric('batch_duration', 1.5)

    lines = metrics.format_summary()

    assert lines[0].startswith("Total elapsed:")
    assert "  folders_processed: 2" in lines
    assert any(line.startswith("  batch_duration: count=1 avg=1.500") for line in lines)

