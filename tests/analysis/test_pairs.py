"""Tests for pairs-trade analysis"""

import pytest
from quantlab.analysis.pairs import analyze_pairs
from quantlab.data.models import Instrument
from quantlab.errors import DataQualityError, SeriesMismatchError


class TestAnalyzePairs:
    """Test window selection and trade pricing"""

    def test_window_and_prices(self, rising_instrument, flat_instrument):
        """Test prices are read at the window indices of each history"""
        # Spread = [0.1, 0.1, 0.0], best window (0, 1)
        result = analyze_pairs(rising_instrument, flat_instrument)

        assert result.window == (0, 1)
        assert result.entry_price_short == 100.0
        assert result.exit_price_short == 110.0
        assert result.entry_price_long == 50.0
        assert result.exit_price_long == 50.0
        assert result.cumulative_spread == pytest.approx(0.2)
        assert result.holding_periods == 1

    def test_profit_and_annualized_return(self, rising_instrument, flat_instrument):
        """Test long-B short-A profit and annualization"""
        result = analyze_pairs(rising_instrument, flat_instrument, trading_days=252)

        # (50 - 50) - (110 - 100) = -10, then -10 / 150 * 252
        assert result.profit == pytest.approx(-10.0)
        assert result.annualized_return == pytest.approx(-16.8)

    def test_window_ends_before_long_leg_moves(self):
        """Test a late move outside the window is not priced"""
        short_leg = Instrument.from_prices("AAA", [100.0, 110.0, 99.0, 99.0])
        long_leg = Instrument.from_prices("BBB", [100.0, 100.0, 100.0, 120.0])

        # Spread = [0.1, -0.1, -0.2]: window (0, 0) prices no move
        result = analyze_pairs(short_leg, long_leg)
        assert result.window == (0, 0)
        assert result.profit == 0.0

    def test_tickers(self, rising_instrument, flat_instrument):
        """Test leg labels"""
        result = analyze_pairs(rising_instrument, flat_instrument)

        assert result.short_ticker == "AAA"
        assert result.long_ticker == "BBB"

    def test_unprofitable_spread_zero_window(self, rising_instrument, flat_instrument):
        """Test reversed legs give the degenerate (0, 0) window"""
        result = analyze_pairs(flat_instrument, rising_instrument)

        assert result.window == (0, 0)
        assert result.profit == 0.0
        assert result.annualized_return == 0.0

    def test_mismatched_histories_rejected(self, rising_instrument):
        """Test analysis is rejected for unequal return counts"""
        short_history = Instrument.from_prices("CCC", [10.0, 11.0])

        with pytest.raises(SeriesMismatchError) as exc_info:
            analyze_pairs(rising_instrument, short_history)

        assert isinstance(exc_info.value, DataQualityError)
        assert exc_info.value.context["tickers"] == ["AAA", "CCC"]
