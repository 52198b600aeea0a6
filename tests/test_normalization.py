import unittest

from wordsearch.data.normalization import normalize_word, normalize_words


class NormalizationTests(unittest.TestCase):
    def test_uppercases_and_strips_whitespace(self) -> None:
        self.assertEqual(normalize_word(" sea lion "), "SEALION")
        self.assertEqual(normalize_word("Sea\tLi on"), "SEALION")

    def test_spaced_and_joined_forms_share_identity(self) -> None:
        self.assertEqual(normalize_word("SEA LION"), normalize_word("sealion"))

    def test_empty_and_blank_inputs(self) -> None:
        self.assertEqual(normalize_word(""), "")
        self.assertEqual(normalize_word("   "), "")

    def test_other_characters_are_kept(self) -> None:
        self.assertEqual(normalize_word("x-ray"), "X-RAY")

    def test_normalize_words_keeps_duplicates_and_order(self) -> None:
        self.assertEqual(normalize_words(["b", "a b", "ab"]), ["B", "AB", "AB"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
