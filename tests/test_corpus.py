import io
import os
import unittest
from unittest.mock import patch

from wordchain import config
from wordchain.corpus import read_sequences, tokenize


class TestCorpus(unittest.TestCase):
    def test_tokenize_splits_on_any_whitespace(self):
        self.assertEqual(tokenize("  I ride\ta\n\nbike "), ["I", "ride", "a", "bike"])

    def test_whole_text_is_one_sequence(self):
        stream = io.StringIO("I ride a bike\nI drink water\n")
        self.assertEqual(read_sequences(stream), [["I", "ride", "a", "bike", "I", "drink", "water"]])

    def test_per_line_skips_blank_lines(self):
        stream = io.StringIO("I ride a bike\n\n   \nI drink water\n")
        self.assertEqual(
            read_sequences(stream, per_line=True),
            [["I", "ride", "a", "bike"], ["I", "drink", "water"]],
        )

    def test_empty_text(self):
        self.assertEqual(read_sequences(io.StringIO("")), [])
        self.assertEqual(read_sequences(io.StringIO(" \n "), per_line=True), [])


class TestConfig(unittest.TestCase):
    def test_int_from_env(self):
        with patch.dict(os.environ, {'WORDCHAIN_TEST_VALUE': '7'}):
            self.assertEqual(config._int_from_env('WORDCHAIN_TEST_VALUE', 3), 7)

    def test_int_from_env_default(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop('WORDCHAIN_TEST_VALUE', None)
            self.assertEqual(config._int_from_env('WORDCHAIN_TEST_VALUE', 3), 3)

    def test_int_from_env_malformed(self):
        with patch.dict(os.environ, {'WORDCHAIN_TEST_VALUE': 'many'}):
            self.assertEqual(config._int_from_env('WORDCHAIN_TEST_VALUE', 3), 3)

    def test_log_level_from_env(self):
        with patch.dict(os.environ, {'WORDCHAIN_TEST_LEVEL': 'debug'}):
            self.assertEqual(config._log_level_from_env('WORDCHAIN_TEST_LEVEL', 'WARNING'), 'DEBUG')

    def test_log_level_from_env_default(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop('WORDCHAIN_TEST_LEVEL', None)
            self.assertEqual(config._log_level_from_env('WORDCHAIN_TEST_LEVEL', 'WARNING'), 'WARNING')

    def test_log_level_from_env_unknown(self):
        with patch.dict(os.environ, {'WORDCHAIN_TEST_LEVEL': 'LOUD'}):
            self.assertEqual(config._log_level_from_env('WORDCHAIN_TEST_LEVEL', 'WARNING'), 'WARNING')


if __name__ == '__main__':
    unittest.main()
