import unittest

from numberset_codec import BitsetCodec, EncodingError, FormatError


class TestBitsetCodec(unittest.TestCase):
    def test_encode_fixed_width(self):
        self.assertEqual(BitsetCodec.encode([1]), "B1:g" + "A" * 50)
        self.assertEqual(BitsetCodec.encode([300]), "B1:" + "A" * 48 + "ABA")
        self.assertEqual(BitsetCodec.encode([]), "B1:" + "A" * 51)
        for numbers in ([], [1], [150, 151], list(range(1, 301))):
            self.assertEqual(len(BitsetCodec.encode(numbers)), 54)

    def test_decode(self):
        self.assertEqual(BitsetCodec.decode("B1:g" + "A" * 50), [1])
        self.assertEqual(BitsetCodec.decode("B1:" + "A" * 48 + "ABA"), [300])
        self.assertEqual(BitsetCodec.decode("B1:" + "A" * 51), [])

    def test_round_trip(self):
        numbers = [1, 2, 8, 9, 64, 128, 255, 256, 299, 300]
        self.assertEqual(BitsetCodec.decode(BitsetCodec.encode(numbers)), numbers)

    def test_bits_past_300_are_ignored(self):
        self.assertEqual(BitsetCodec.decode("B1:" + "A" * 48 + "AP8"), [297, 298, 299, 300])

    def test_empty_body(self):
        with self.assertRaises(FormatError) as ctx:
            BitsetCodec.decode("B1:")
        self.assertIn("empty", str(ctx.exception))

    def test_wrong_length(self):
        for body, size in (("AA", 1), ("A" * 50, 37), ("A" * 52, 39)):
            with self.assertRaises(FormatError) as ctx:
                BitsetCodec.decode("B1:" + body)
            self.assertIn(f"expected 38 bytes, got {size}", str(ctx.exception))

    def test_bad_alphabet(self):
        with self.assertRaises(FormatError):
            BitsetCodec.decode("B1:" + "*" * 51)

    def test_wrong_marker(self):
        with self.assertRaises(FormatError):
            BitsetCodec.decode("D1:AA")

    def test_out_of_range_member(self):
        for numbers in ([0], [301]):
            with self.assertRaises(EncodingError):
                BitsetCodec.encode(numbers)


if __name__ == "__main__":
    unittest.main()
