"""
Tests for the Portfolio bookkeeping.
"""

import unittest

from tradeledger.portfolio import Portfolio


class TestPortfolio(unittest.TestCase):
    """Buy/sell arithmetic and their inverses."""

    def setUp(self):
        self.portfolio = Portfolio(initial_cash=10000.0)

    def test_absent_symbol_is_zero(self):
        self.assertEqual(self.portfolio.position('AAPL'), 0)
        self.assertEqual(self.portfolio.positions(), {})

    def test_buy(self):
        self.portfolio.buy('AAPL', 10, 150.0)
        self.assertEqual(self.portfolio.position('AAPL'), 10)
        self.assertEqual(self.portfolio.cash, 8500.0)

    def test_sell_allows_short_and_negative_cash_is_not_enforced(self):
        self.portfolio.sell('MSFT', 5, 200.0)
        self.assertEqual(self.portfolio.position('MSFT'), -5)
        self.assertEqual(self.portfolio.cash, 11000.0)

        self.portfolio.buy('NVDA', 100, 890.5)
        self.assertLess(self.portfolio.cash, 0)

    def test_buy_then_reverse_buy_restores_state(self):
        before = Portfolio(10000.0)
        self.portfolio.buy('AAPL', 7, 185.37)
        self.portfolio.reverse_buy('AAPL', 7, 185.37)

        self.assertEqual(self.portfolio.position('AAPL'), 0)
        self.assertAlmostEqual(self.portfolio.cash, 10000.0, places=9)
        self.assertEqual(self.portfolio.positions(), before.positions())

    def test_sell_then_reverse_sell_restores_state(self):
        self.portfolio.buy('TSLA', 20, 175.0)
        cash = self.portfolio.cash

        self.portfolio.sell('TSLA', 30, 176.25)
        self.portfolio.reverse_sell('TSLA', 30, 176.25)

        self.assertEqual(self.portfolio.position('TSLA'), 20)
        self.assertAlmostEqual(self.portfolio.cash, cash, places=9)

    def test_positions_excludes_flat_symbols(self):
        self.portfolio.buy('AAPL', 10, 1.0)
        self.portfolio.sell('AAPL', 10, 1.0)
        self.portfolio.buy('GOOGL', 3, 1.0)
        self.assertEqual(self.portfolio.positions(), {'GOOGL': 3})

    def test_positions_is_a_copy(self):
        self.portfolio.buy('AAPL', 10, 1.0)
        positions = self.portfolio.positions()
        positions['AAPL'] = 999
        self.assertEqual(self.portfolio.position('AAPL'), 10)

    def test_total_value(self):
        self.portfolio.buy('AAPL', 10, 100.0)
        self.portfolio.sell('MSFT', 2, 50.0)
        # 10000 - 1000 + 100 = 9100 cash
        value = self.portfolio.total_value({'AAPL': 110.0, 'MSFT': 40.0})
        self.assertAlmostEqual(value, 9100.0 + 1100.0 - 80.0)

        # Missing price -> valued at 0
        self.assertAlmostEqual(self.portfolio.total_value({}), 9100.0)

    def test_equality(self):
        other = Portfolio(10000.0)
        self.assertEqual(self.portfolio, other)
        other.buy('AAPL', 1, 1.0)
        self.assertNotEqual(self.portfolio, other)
        other.reverse_buy('AAPL', 1, 1.0)
        self.assertEqual(self.portfolio, other)

    def test_trace_is_logged(self):
        with self.assertLogs('tradeledger.portfolio', level='DEBUG') as cm:
            self.portfolio.buy('AAPL', 100, 185.5)
            self.portfolio.reverse_buy('AAPL', 100, 185.5)
        self.assertIn('[EXEC] BUY  100 AAPL @ $185.50  (cash: $-8550.00)', cm.output[0])
        self.assertIn('[UNDO] BUY  100 AAPL @ $185.50 reversed', cm.output[1])

    def test_trace_keeps_fractional_quantity(self):
        with self.assertLogs('tradeledger.portfolio', level='DEBUG') as cm:
            self.portfolio.sell('AAPL', 1.5, 10.0)
        self.assertIn('[EXEC] SELL 1.5 AAPL @ $10.00', cm.output[0])

    def test_failed_update_leaves_state_untouched(self):
        for trade in (self.portfolio.sell, self.portfolio.reverse_buy):
            with self.subTest(trade=trade.__name__):
                with self.assertRaises(TypeError):
                    trade('AAPL', 1, '10')
                self.assertEqual(self.portfolio.position('AAPL'), 0)
                self.assertEqual(self.portfolio.cash, 10000.0)


if __name__ == '__main__':
    unittest.main()
