#!/usr/bin/env python3
"""
Unit tests for the depth-aware argument splitter.
"""

import unittest

from epox.errors import MalformedProgramError
from epox.splitter import find_matching_paren, split_arguments


class TestSplitArguments(unittest.TestCase):
    """Test cases for split_arguments."""

    def test_nested_commas_not_split(self):
        self.assertEqual(split_arguments("f(1,2), g(3)"), ["f(1,2)", "g(3)"])

    def test_empty(self):
        self.assertEqual(split_arguments(""), [])
        self.assertEqual(split_arguments("   "), [])

    def test_single_argument(self):
        self.assertEqual(split_arguments("x"), ["x"])
        self.assertEqual(split_arguments("f(a, b)"), ["f(a, b)"])

    def test_space_and_comma_separators(self):
        cases = {
            "a b c": ["a", "b", "c"],
            "a,b,c": ["a", "b", "c"],
            "a, b,  c": ["a", "b", "c"],
            "a , b": ["a", "b"],
            "a  ,  b": ["a", "b"],
        }
        for arg_str, expected in cases.items():
            with self.subTest(arg_str=arg_str):
                self.assertEqual(split_arguments(arg_str), expected)

    def test_nested_whitespace_kept_verbatim(self):
        self.assertEqual(split_arguments("IF(a,  b c), NOT(x)"), ["IF(a,  b c)", "NOT(x)"])

    def test_deep_nesting(self):
        self.assertEqual(split_arguments("A(B(C(1, 2)), 3) D()"), ["A(B(C(1, 2)), 3)", "D()"])

    def test_trailing_space(self):
        self.assertEqual(split_arguments("a, b "), ["a", "b"])

    def test_empty_argument_between_commas(self):
        for arg_str in ["a,,b", "a, ,b", "a , , b", ",a", " , a", "a, b,", "a ,", ","]:
            with self.subTest(arg_str=arg_str):
                with self.assertRaises(MalformedProgramError):
                    split_arguments(arg_str)

    def test_commas_inside_nested_call_unchecked(self):
        self.assertEqual(split_arguments("f(a,,b), c"), ["f(a,,b)", "c"])

    def test_unbalanced(self):
        for arg_str in ["f(1, 2", "1)", "f(1)) g(", "(("]:
            with self.subTest(arg_str=arg_str):
                with self.assertRaises(MalformedProgramError):
                    split_arguments(arg_str)


class TestFindMatchingParen(unittest.TestCase):
    """Test cases for find_matching_paren."""

    def test_matching(self):
        self.assertEqual(find_matching_paren("f(a(b))c", 1), 6)
        self.assertEqual(find_matching_paren("f()", 1), 2)
        self.assertEqual(find_matching_paren("f(a(b))c", 3), 5)

    def test_unclosed(self):
        self.assertEqual(find_matching_paren("f(a(b)", 1), -1)


if __name__ == '__main__':
    unittest.main()
