import unittest

from numberset_codec import normalize_numbers


class TestNormalizer(unittest.TestCase):
    def test_sorts_and_deduplicates(self):
        self.assertEqual(normalize_numbers([5, 3, 3, 1, 5]), [1, 3, 5])

    def test_range_bounds(self):
        self.assertEqual(normalize_numbers([0, 1, 300, 301, -1]), [1, 300])

    def test_non_integers_are_dropped(self):
        values = [2, 2.5, float("nan"), float("inf"), float("-inf"), "7", None, True, False, [1], 4.0]
        self.assertEqual(normalize_numbers(values), [2, 4])

    def test_integral_float_matches_int(self):
        self.assertEqual(normalize_numbers([3.0, 3]), [3])
        self.assertIsInstance(normalize_numbers([3.0])[0], int)

    def test_accepts_any_iterable(self):
        self.assertEqual(normalize_numbers({9, 8}), [8, 9])
        self.assertEqual(normalize_numbers(n for n in (2, 1)), [1, 2])
        self.assertEqual(normalize_numbers(range(299, 305)), [299, 300])

    def test_empty(self):
        self.assertEqual(normalize_numbers([]), [])
        self.assertEqual(normalize_numbers(None), [])
        self.assertEqual(normalize_numbers([0, 500, "a"]), [])

    def test_idempotent(self):
        raw = [300, 7, 7, 1.0, -3, 150, 2.2]
        once = normalize_numbers(raw)
        self.assertEqual(normalize_numbers(once), once)


if __name__ == "__main__":
    unittest.main()
