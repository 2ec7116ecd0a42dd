import unittest
from datetime import date

from fleetboard.timeline import build_board, calculate_window
from tests.fixtures import make_aircraft, make_route, utc


class TestBuildBoard(unittest.TestCase):
    def setUp(self) -> None:
        self.window = calculate_window(date(2025, 1, 1), date(2025, 1, 2), 24)
        self.fleet = [make_aircraft('ac-2', 'N456CD'), make_aircraft('ac-1', 'N123AB')]
        self.routes = [
            make_route('aa102', 'ac-1', utc(2025, 1, 1, 14), utc(2025, 1, 1, 19)),
            make_route('aa101', 'ac-1', utc(2025, 1, 1, 5), utc(2025, 1, 1, 10)),
            make_route('dl201', 'ac-2', utc(2025, 1, 2, 6), utc(2025, 1, 2, 8)),
            make_route('dl200', 'ac-2', utc(2024, 12, 31, 6), utc(2024, 12, 31, 8)),
            make_route('ua300', 'ac-9', utc(2025, 1, 1, 6), utc(2025, 1, 1, 8)),
        ]

    def test_rows_ordered_by_registration(self) -> None:
        board = build_board(self.window, self.fleet, self.routes)
        self.assertEqual([r.aircraft.registration for r in board.rows], ['N123AB', 'N456CD'])

    def test_events_ordered_by_departure_and_hidden_counted(self) -> None:
        board = build_board(self.window, self.fleet, self.routes)

        first, second = board.rows
        self.assertEqual([e.route.flight_number for e in first.events], ['AA101', 'AA102'])
        self.assertEqual([e.route.flight_number for e in second.events], ['DL201'])
        self.assertEqual(board.hidden_count, 2)

    def test_board_carries_grid(self) -> None:
        board = build_board(self.window, self.fleet, self.routes)

        self.assertEqual(len(board.date_labels), 2)
        self.assertEqual(len(board.hour_ticks), 48)
        self.assertEqual(len(board.separators), 49)

    def test_to_dict_embeds_positions(self) -> None:
        data = build_board(self.window, self.fleet, self.routes).to_dict()

        event = data['rows'][0]['events'][0]
        self.assertEqual(event['flight_number'], 'AA101')
        self.assertEqual(event['departure_time'], '2025-01-01T05:00:00+00:00')
        self.assertEqual(round(event['position']['left_percent'], 2), 10.42)
        self.assertEqual(data['window']['num_chunks'], 2)
        self.assertEqual(data['labels']['dates'][1]['text'], 'Jan 02')

    def test_empty_fleet(self) -> None:
        board = build_board(self.window, [], self.routes)
        self.assertEqual(board.rows, [])
        self.assertEqual(board.hidden_count, len(self.routes))


if __name__ == "__main__":
    unittest.main(verbosity=2)
