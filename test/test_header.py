#!/usr/bin/env python3

from datetime import timedelta
from itertools import permutations
import unittest

from cachecontrolheader import Header, format_header, parse


class FormatTesters(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual(format_header(Header()), "")
        self.assertEqual(format_header(parse("")), "")
        self.assertEqual(str(parse("")), "")

    def test_canonical_order(self) -> None:
        self.assertEqual(
            format_header(parse("private, max-age=3600, must-revalidate")),
            "max-age=3600, must-revalidate, private",
        )

    def test_order_is_stable(self) -> None:
        directives = ["s-maxage=10", "public", "no-cache", "max-stale=5", "max-age=1"]
        expected = "max-age=1, max-stale=5, no-cache, public, s-maxage=10"
        for ordering in permutations(directives):
            self.assertEqual(format_header(parse(", ".join(ordering))), expected)

    def test_full(self) -> None:
        header = Header(
            no_cache=True,
            no_store=True,
            no_transform=True,
            only_if_cached=True,
            must_revalidate=True,
            must_understand=True,
            private=True,
            proxy_revalidate=True,
            public=True,
            max_age=timedelta(seconds=1),
            max_stale=timedelta(seconds=2),
            min_fresh=timedelta(seconds=3),
            s_maxage=timedelta(seconds=4),
        )
        self.assertEqual(
            str(header),
            "max-age=1, max-stale=2, min-fresh=3, no-cache, no-store, no-transform, "
            "only-if-cached, must-revalidate, must-understand, private, "
            "proxy-revalidate, public, s-maxage=4",
        )

    def test_whole_seconds(self) -> None:
        self.assertEqual(
            format_header(Header(max_age=timedelta(seconds=90, milliseconds=700))),
            "max-age=90",
        )
        self.assertEqual(format_header(Header(max_age=timedelta(0))), "max-age=0")

    def test_round_trip(self) -> None:
        for header in [
            Header(),
            Header(max_age=timedelta(0)),
            Header(public=True, s_maxage=timedelta(days=365)),
            Header(no_store=True, no_transform=True, min_fresh=timedelta(seconds=30)),
            Header(must_understand=True, only_if_cached=True, max_stale=timedelta(1)),
        ]:
            self.assertEqual(parse(format_header(header)), header)

    def test_not_an_echo(self) -> None:
        self.assertEqual(str(parse("Public ,  MAX-AGE = 5")), "max-age=5, public")


class HeaderTesters(unittest.TestCase):
    def test_defaults(self) -> None:
        header = Header()
        self.assertFalse(header.no_cache)
        self.assertFalse(header.public)
        self.assertIsNone(header.max_age)
        self.assertIsNone(header.s_maxage)
        self.assertFalse(header)

    def test_bool(self) -> None:
        self.assertTrue(Header(max_age=timedelta(0)))
        self.assertTrue(Header(private=True))

    def test_equality(self) -> None:
        self.assertEqual(Header(private=True), Header(private=True))
        self.assertNotEqual(Header(private=True), Header(public=True))
        self.assertNotEqual(Header(max_age=timedelta(0)), Header())
        self.assertNotEqual(Header(), "")

    def test_directives(self) -> None:
        header = parse("private, max-age=60")
        self.assertEqual(list(header.directives()), [("max-age", 60), ("private", None)])

    def test_repr(self) -> None:
        self.assertEqual(repr(Header()), "Header()")
        self.assertEqual(
            repr(Header(private=True, max_age=timedelta(0))),
            "Header(max_age=datetime.timedelta(0), private=True)",
        )

    def test_bad_attributes(self) -> None:
        with self.assertRaises(TypeError):
            Header(stale_while_revalidate=timedelta(1))
        with self.assertRaises(TypeError):
            Header(max_age=60)
        with self.assertRaises(ValueError):
            Header(max_age=timedelta(seconds=-1))
        with self.assertRaises(ValueError):
            Header(s_maxage=timedelta(microseconds=-1))

    def test_caller_owns_result(self) -> None:
        first = parse("private")
        first.private = False
        self.assertTrue(parse("private").private)


if __name__ == "__main__":
    unittest.main()
