from delayeval.exceptions import UnfilledPlaceholderError
from delayeval.replace import ReplacePlaceholder, merge
from delayeval.placeholder import _
from hypothesis import given
import hypothesis.strategies as st
from typing import Any, List
import unittest


values = st.integers()
tokens = st.one_of(values, st.just(_))


class TestMergeExamples(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual((), merge((), ()))
        self.assertEqual((10,), merge((), (10,)))
        self.assertEqual((10,), merge((10,), ()))

    def test_single_placeholder(self) -> None:
        self.assertEqual((10, 20), merge((_, 20), (10,)))

    def test_more_supplied_than_placeholders(self) -> None:
        self.assertEqual(
            (10, 20, 30, 40, 50), merge((_, 20, _, 40), (10, 30, 50))
        )

    def test_consecutive_placeholders(self) -> None:
        self.assertEqual(
            ("a", "b", "c", "d", "e"),
            merge(("a", _, _, "d"), ("b", "c", "e")),
        )

    def test_unfilled_placeholder_is_literal(self) -> None:
        self.assertEqual((_, 20), merge((_, 20), ()))
        self.assertEqual((1, _), merge((_, _), (1,)))

    def test_iterables(self) -> None:
        self.assertEqual(
            (0, 1, 2), merge(iter((_, 1)), (i for i in (0, 2)))
        )

    def test_custom_placeholder(self) -> None:
        self.assertEqual((1, 2, 3), merge((None, 2), (1, 3), None))
        self.assertEqual((None, 2, 1), merge((None, 2), (1,)))

    def test_predicate(self) -> None:
        self.assertEqual(
            ("a", "b", 3),
            merge(("?", "?", 3), ("a", "b"), predicate=lambda v: v == "?"),
        )


class TestStrictMerge(unittest.TestCase):
    def test_filled(self) -> None:
        self.assertEqual((1, 2, 3), merge((_, 2), (1, 3), strict=True))

    def test_unfilled(self) -> None:
        with self.assertRaises(UnfilledPlaceholderError) as cm:
            merge((1, _, _), (2,), strict=True)
        self.assertEqual(2, cm.exception.index)
        self.assertEqual(1, cm.exception.supplied)
        self.assertIsInstance(cm.exception, TypeError)
        self.assertIn("position 2", str(cm.exception))

    def test_len_raises_like_iteration(self) -> None:
        r = ReplacePlaceholder((1, _, _), (2,), strict=True)
        with self.assertRaises(UnfilledPlaceholderError) as cm:
            len(r)
        self.assertEqual(2, cm.exception.index)
        self.assertEqual(3, len(ReplacePlaceholder((1, _, _), (2, 3), strict=True)))

    @given(st.lists(tokens), st.lists(values))
    def test_raises_iff_placeholders_outnumber_values(
        self, fixed: List[Any], supplied: List[int]
    ) -> None:
        holes = sum(1 for v in fixed if v is _)
        if holes > len(supplied):
            with self.assertRaises(UnfilledPlaceholderError):
                merge(fixed, supplied, strict=True)
        else:
            self.assertEqual(
                merge(fixed, supplied), merge(fixed, supplied, strict=True)
            )


class TestMergeProperties(unittest.TestCase):
    @given(st.lists(values), st.lists(values))
    def test_no_placeholders_concatenates(
        self, fixed: List[int], supplied: List[int]
    ) -> None:
        self.assertEqual(tuple(fixed + supplied), merge(fixed, supplied))

    @given(st.lists(tokens), st.lists(values))
    def test_length(self, fixed: List[Any], supplied: List[int]) -> None:
        holes = sum(1 for v in fixed if v is _)
        merged = merge(fixed, supplied)
        self.assertEqual(
            len(fixed) + len(supplied) - min(holes, len(supplied)),
            len(merged),
        )
        self.assertEqual(
            len(merged), len(ReplacePlaceholder(fixed, supplied))
        )

    @given(st.lists(tokens), st.lists(values))
    def test_order_is_preserved(
        self, fixed: List[Any], supplied: List[int]
    ) -> None:
        tagged_fixed = [v if v is _ else ("fixed", v) for v in fixed]
        tagged_supplied = [("supplied", v) for v in supplied]
        merged = merge(tagged_fixed, tagged_supplied)
        self.assertListEqual(
            [v for v in tagged_fixed if v is not _],
            [v for v in merged if v is not _ and v[0] == "fixed"],
        )
        self.assertListEqual(
            tagged_supplied,
            [v for v in merged if v is not _ and v[0] == "supplied"],
        )

    @given(st.lists(tokens), st.lists(tokens), st.lists(values))
    def test_assoc(
        self, a: List[Any], b: List[Any], c: List[int]
    ) -> None:
        self.assertEqual(merge(a, merge(b, c)), merge(merge(a, b), c))

    @given(st.lists(tokens), st.lists(values))
    def test_repeatable(self, fixed: List[Any], supplied: List[int]) -> None:
        r = ReplacePlaceholder(fixed, supplied)
        self.assertEqual(tuple(r), tuple(r))
