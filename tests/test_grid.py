import random
import unittest

from wordsearch.core.constants import ALPHABET, DIRECTIONS
from wordsearch.core.exceptions import ConfigurationError
from wordsearch.core.models import Placement
from wordsearch.engine.grid import GridBuilder, GridConfig, LetterGrid, build_grid
from wordsearch.engine.validator import PuzzleValidator


ANIMALS = ["CAT", "DOG", "HORSE", "sea lion", "Tiger", "OWL", "ZEBRA", "EEL"]


class GridBuilderTests(unittest.TestCase):
    def test_every_cell_holds_one_uppercase_letter(self) -> None:
        for seed in range(10):
            grid, _ = build_grid(ANIMALS, 8, rng=random.Random(seed))
            self.assertEqual(grid.size, 8)
            for row in grid.rows:
                self.assertEqual(len(row), 8)
                for letter in row:
                    self.assertEqual(len(letter), 1)
                    self.assertIn(letter, ALPHABET)

    def test_placements_read_back_their_words(self) -> None:
        for seed in range(25):
            grid, placements = build_grid(ANIMALS, 8, rng=random.Random(seed))
            for placement in placements:
                self.assertEqual(grid.read(placement.cells), placement.word)

    def test_crossing_words_never_overwrite_letters(self) -> None:
        # Heavy overlap pressure: many words sharing letters on a small grid.
        words = ["AAAA", "ABBA", "BAAB", "ABAB", "BABA", "AABB", "BBAA", "ABA", "BAB"]
        for seed in range(25):
            grid, placements = build_grid(words, 4, rng=random.Random(seed))
            for placement in placements:
                self.assertEqual(grid.read(placement.cells), placement.word)

    def test_placement_cells_form_straight_line(self) -> None:
        grid, placements = build_grid(ANIMALS, 10, rng=random.Random(3))
        self.assertTrue(placements)
        for placement in placements:
            self.assertEqual(len(placement.cells), len(placement.word))
            if len(placement.cells) > 1:
                self.assertIn(placement.direction, DIRECTIONS)

    def test_words_are_normalized_before_placement(self) -> None:
        _, placements = build_grid(["sea lion"], 10, rng=random.Random(1))
        self.assertEqual(len(placements), 1)
        self.assertEqual(placements[0].word, "SEALION")
        self.assertEqual(placements[0].source, "sea lion")

    def test_duplicates_are_attempted_independently(self) -> None:
        _, placements = build_grid(["SEA LION", "sealion"], 10, rng=random.Random(2))
        self.assertEqual([p.word for p in placements], ["SEALION", "SEALION"])

    def test_word_longer_than_grid_is_never_placed(self) -> None:
        for seed in range(30):
            _, placements = build_grid(
                ["ENCYCLOPEDIA", "BEE"], 5, rng=random.Random(seed)
            )
            self.assertNotIn("ENCYCLOPEDIA", [p.word for p in placements])

    def test_single_letter_word_is_placed(self) -> None:
        grid, placements = build_grid(["x"], 2, rng=random.Random(0))
        self.assertEqual(len(placements), 1)
        self.assertEqual(len(placements[0].cells), 1)
        self.assertEqual(grid.read(placements[0].cells), "X")

    def test_blank_word_is_skipped(self) -> None:
        _, placements = build_grid(["   ", "CAT"], 5, rng=random.Random(0))
        self.assertEqual([p.word for p in placements], ["CAT"])

    def test_empty_word_list_gives_filler_grid(self) -> None:
        grid, placements = build_grid([], 4, rng=random.Random(0))
        self.assertEqual(placements, [])
        self.assertEqual(grid.size, 4)
        self.assertTrue(all(letter in ALPHABET for row in grid.rows for letter in row))

    def test_same_seed_same_grid(self) -> None:
        first = build_grid(ANIMALS, 9, rng=random.Random(42))
        second = build_grid(ANIMALS, 9, rng=random.Random(42))
        self.assertEqual(first, second)

    def test_config_seed_is_used_without_rng(self) -> None:
        first = GridBuilder(GridConfig(size=7, rng_seed=11)).build(ANIMALS)
        second = GridBuilder(GridConfig(size=7, rng_seed=11)).build(ANIMALS)
        self.assertEqual(first, second)

    def test_non_positive_size_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            build_grid(["CAT"], 0)
        with self.assertRaises(ConfigurationError):
            build_grid(["CAT"], -3)

    def test_non_positive_attempt_budget_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            build_grid(["CAT"], 5, max_attempts=0)

    def test_larger_attempt_budget_places_more_words(self) -> None:
        words = ["ABCDE", "FGHIJ", "KLMNO", "PQRST", "UVWXY", "ZABCD", "EFGHI", "JKLMN"]
        low = high = 0
        for seed in range(10):
            _, few = build_grid(words, 6, rng=random.Random(seed), max_attempts=1)
            _, many = build_grid(words, 6, rng=random.Random(seed), max_attempts=500)
            low += len(few)
            high += len(many)
        self.assertGreater(high, low)

    def test_grid_is_immutable(self) -> None:
        grid, _ = build_grid(["CAT"], 3, rng=random.Random(0))
        with self.assertRaises(AttributeError):
            grid.rows = ()  # type: ignore[misc]
        with self.assertRaises(TypeError):
            grid.rows[0][0] = "Z"  # type: ignore[index]


class ValidatorTests(unittest.TestCase):
    def _grid(self, *rows: str) -> LetterGrid:
        return LetterGrid(rows=tuple(tuple(row) for row in rows))

    def test_accepts_built_grid(self) -> None:
        grid, placements = build_grid(ANIMALS, 10, rng=random.Random(5))
        result = PuzzleValidator().validate(grid, placements)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_rejects_non_square_grid(self) -> None:
        grid = self._grid("ABC", "DE", "FGH")
        result = PuzzleValidator().validate(grid, [])
        self.assertFalse(result.ok)

    def test_rejects_lowercase_cell(self) -> None:
        grid = self._grid("AB", "cD")
        result = PuzzleValidator().validate(grid, [])
        self.assertFalse(result.ok)
        self.assertIn("(1,0)", result.messages[0])

    def test_rejects_placement_that_does_not_read_back(self) -> None:
        grid = self._grid("CAT", "XXX", "XXX")
        bad = Placement(word="DOG", cells=((0, 0), (0, 1), (0, 2)))
        result = PuzzleValidator().validate(grid, [bad])
        self.assertFalse(result.ok)

    def test_rejects_bent_placement(self) -> None:
        grid = self._grid("CAX", "XXT", "XXX")
        bent = Placement(word="CAT", cells=((0, 0), (0, 1), (1, 2)))
        result = PuzzleValidator().validate(grid, [bent])
        self.assertFalse(result.ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
