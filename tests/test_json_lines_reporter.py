"""
Testes do reporter JSON Lines.
"""

import io
import json

import pytest

from domain.entities.market_stats import MarketSummary
from infrastructure.reporting.json_lines_reporter import JsonLinesSummaryReporter


def make_summary(market=1, **values) -> MarketSummary:
    defaults = {
        "total_volume": 20.0,
        "mean_price": 3.0,
        "mean_volume": 10.0,
        "volume_weighted_average_price": 3.0,
        "percentage_buy": 0.5,
    }
    defaults.update(values)
    return MarketSummary(market=market, **defaults)


class TestJsonLinesSummaryReporter:
    """Serialização de um resumo por linha."""

    def test_one_json_object_per_line(self):
        out = io.StringIO()
        reporter = JsonLinesSummaryReporter(out, include_market=False)

        reporter.report(make_summary(market=1))
        reporter.report(make_summary(market=2, total_volume=5.0))
        reporter.close()

        lines = out.getvalue().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0]) == {
            "total_volume": 20.0,
            "mean_price": 3.0,
            "mean_volume": 10.0,
            "volume_weighted_average_price": 3.0,
            "percentage_buy": 0.5,
        }
        assert json.loads(lines[1])["total_volume"] == 5.0

    def test_market_excluded_by_default_shape(self):
        out = io.StringIO()
        reporter = JsonLinesSummaryReporter(out, include_market=False)
        reporter.report(make_summary(market=8))
        reporter.close()

        assert "market" not in json.loads(out.getvalue())

    def test_include_market_puts_market_first(self):
        out = io.StringIO()
        reporter = JsonLinesSummaryReporter(out, include_market=True)
        reporter.report(make_summary(market=8))
        reporter.close()

        payload = json.loads(out.getvalue())
        assert list(payload)[0] == "market"
        assert payload["market"] == 8

    def test_nothing_written_before_flush(self):
        out = io.StringIO()
        reporter = JsonLinesSummaryReporter(out, include_market=False, buffer_size=10)

        reporter.report(make_summary())
        assert out.getvalue() == ""

        reporter.flush()
        assert out.getvalue().count("\n") == 1
        assert reporter.written == 1

    def test_full_buffer_is_flushed(self):
        out = io.StringIO()
        reporter = JsonLinesSummaryReporter(out, include_market=False, buffer_size=2)

        reporter.report(make_summary(market=1))
        reporter.report(make_summary(market=2))

        assert out.getvalue().count("\n") == 2
        assert len(reporter.buffer) == 0

    def test_report_after_close_fails(self):
        reporter = JsonLinesSummaryReporter(io.StringIO(), include_market=False)
        reporter.close()

        with pytest.raises(RuntimeError):
            reporter.report(make_summary())

    def test_non_finite_value_is_refused(self):
        reporter = JsonLinesSummaryReporter(io.StringIO(), include_market=False)
        reporter.report(make_summary(mean_price=float("nan")))

        with pytest.raises(ValueError):
            reporter.flush()

    def test_close_is_idempotent(self):
        out = io.StringIO()
        reporter = JsonLinesSummaryReporter(out, include_market=False)
        reporter.report(make_summary())

        reporter.close()
        reporter.close()

        assert out.getvalue().count("\n") == 1
