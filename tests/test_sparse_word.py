import unittest

from xword.data.sparse_word import SparseWord


class SparseWordTests(unittest.TestCase):
    def test_matches_case_insensitively(self) -> None:
        pattern = SparseWord(["A", None, "t"])
        for word in ("act", "ACT", "aNt", "Apt"):
            with self.subTest(word=word):
                self.assertTrue(pattern.matches(word))
        self.assertFalse(pattern.matches("bat"))

    def test_length_must_match_exactly(self) -> None:
        pattern = SparseWord.from_pattern("a.t")
        self.assertFalse(pattern.matches("acts"))
        self.assertFalse(pattern.matches("at"))
        self.assertFalse(SparseWord.from_pattern("...").matches("abcd"))

    def test_wildcards_match_anything(self) -> None:
        pattern = SparseWord([None, None])
        self.assertTrue(pattern.matches("zz"))
        self.assertTrue(pattern.matches("a-"))

    def test_equality_follows_the_pattern(self) -> None:
        self.assertEqual(SparseWord(["A", None, "T"]), SparseWord.from_pattern("a.t"))
        self.assertEqual(hash(SparseWord(["A", None])), hash(SparseWord.from_pattern("a.")))
        self.assertNotEqual(SparseWord.from_pattern("a.t"), SparseWord.from_pattern("a.t."))
        self.assertNotEqual(SparseWord.from_pattern("a.t"), SparseWord.from_pattern("abt"))

    def test_pattern_and_length(self) -> None:
        pattern = SparseWord(["Z", None, None, None, "Y"])
        self.assertEqual(pattern.pattern, "z...y")
        self.assertEqual(len(pattern), 5)
        self.assertEqual(pattern.letters, ("z", None, None, None, "y"))

    def test_positions_hold_single_characters(self) -> None:
        with self.assertRaises(ValueError):
            SparseWord(["ab", None])
        with self.assertRaises(ValueError):
            SparseWord([""])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
