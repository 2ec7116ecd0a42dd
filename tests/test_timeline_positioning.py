import math
import unittest
from datetime import date, timedelta

from fleetboard.timeline.positioning import MIN_WIDTH_PERCENT, position_event
from fleetboard.timeline.window import calculate_window
from tests.fixtures import utc


class TestPositionEvent(unittest.TestCase):
    def setUp(self) -> None:
        self.daily = calculate_window(date(2025, 1, 1), date(2025, 1, 2), 24)
        self.six_hourly = calculate_window(date(2025, 1, 1), date(2025, 1, 2), 6)

    def test_morning_leg_on_daily_chunks(self) -> None:
        pos = position_event(utc(2025, 1, 1, 5), utc(2025, 1, 1, 10), self.daily)

        self.assertTrue(pos.visible)
        self.assertEqual(pos.chunk_index, 0)
        self.assertEqual(round(pos.left_percent, 2), 10.42)
        self.assertEqual(round(pos.width_percent, 2), 10.42)

    def test_departure_in_second_six_hour_chunk(self) -> None:
        pos = position_event(utc(2025, 1, 1, 7), utc(2025, 1, 1, 9), self.six_hourly)

        self.assertTrue(pos.visible)
        self.assertEqual(pos.chunk_index, 1)
        self.assertEqual(round(pos.left_percent, 2), 14.58)

    def test_departure_at_window_start_is_flush_left(self) -> None:
        for chunk_hours in (6, 12, 24):
            window = calculate_window(date(2025, 1, 1), date(2025, 1, 2), chunk_hours)
            pos = position_event(window.day_start, window.day_start + timedelta(hours=1), window)
            self.assertTrue(pos.visible)
            self.assertEqual(pos.left_percent, 0)
            self.assertEqual(pos.chunk_index, 0)

    def test_departure_at_window_end_lands_in_last_chunk(self) -> None:
        for chunk_hours in (6, 12, 24):
            window = calculate_window(date(2025, 1, 1), date(2025, 1, 2), chunk_hours)
            pos = position_event(window.day_end, window.day_end + timedelta(hours=2), window)
            self.assertTrue(pos.visible)
            self.assertEqual(pos.chunk_index, window.num_chunks - 1)
            self.assertLess(pos.left_percent, 100)

    def test_departure_before_window_is_hidden(self) -> None:
        pos = position_event(utc(2024, 12, 31, 22), utc(2024, 12, 31, 23), self.daily)

        self.assertFalse(pos.visible)
        self.assertEqual(pos.chunk_index, -1)
        self.assertEqual(pos.left_percent, 0)
        self.assertEqual(pos.width_percent, 0)

    def test_leg_in_progress_at_window_start_is_hidden(self) -> None:
        # Visibility is keyed on departure only
        pos = position_event(utc(2024, 12, 31, 23), utc(2025, 1, 1, 4), self.daily)
        self.assertFalse(pos.visible)
        self.assertEqual(pos.chunk_index, -1)

    def test_departure_at_window_close_is_hidden(self) -> None:
        close = self.daily.day_start + timedelta(hours=self.daily.total_hours)
        pos = position_event(close, close + timedelta(hours=1), self.daily)
        self.assertFalse(pos.visible)
        self.assertEqual(pos.chunk_index, -1)

    def test_short_leg_gets_minimum_width(self) -> None:
        pos = position_event(utc(2025, 1, 1, 12), utc(2025, 1, 1, 12, 1), self.daily)
        self.assertEqual(pos.width_percent, MIN_WIDTH_PERCENT)

    def test_leg_crossing_chunk_boundary_is_not_split(self) -> None:
        pos = position_event(utc(2025, 1, 1, 23), utc(2025, 1, 2, 1), self.daily)

        self.assertEqual(pos.chunk_index, 0)
        self.assertAlmostEqual(pos.width_percent, 2 / 24 * 50)
        self.assertGreater(pos.left_percent + pos.width_percent, 50)

    def test_fractional_hours(self) -> None:
        pos = position_event(utc(2025, 1, 1, 6, 30), utc(2025, 1, 1, 7, 15), self.six_hourly)

        self.assertEqual(pos.chunk_index, 1)
        self.assertAlmostEqual(pos.left_percent, 12.5 + (0.5 / 6) * 12.5)
        self.assertAlmostEqual(pos.width_percent, (0.75 / 6) * 12.5)

    def test_recomputation_is_identical(self) -> None:
        dep, arr = utc(2025, 1, 2, 13, 17), utc(2025, 1, 2, 18, 44)
        first = position_event(dep, arr, self.six_hourly)
        second = position_event(dep, arr, self.six_hourly)
        self.assertEqual(first, second)

    def test_every_departure_inside_window_is_placed_on_grid(self) -> None:
        for chunk_hours in (6, 12, 24):
            window = calculate_window(date(2025, 1, 1), date(2025, 1, 3), chunk_hours)
            self.assertEqual(window.num_chunks, math.ceil(window.num_days * 24 / chunk_hours))
            departure = window.day_start
            while departure <= window.day_end:
                pos = position_event(departure, departure + timedelta(minutes=50), window)
                self.assertTrue(pos.visible, departure)
                self.assertGreaterEqual(pos.left_percent, 0)
                self.assertLess(pos.left_percent, 100)
                self.assertGreaterEqual(pos.width_percent, MIN_WIDTH_PERCENT)
                self.assertTrue(0 <= pos.chunk_index < window.num_chunks)
                departure += timedelta(minutes=45)


if __name__ == "__main__":
    unittest.main(verbosity=2)
