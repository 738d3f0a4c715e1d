import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from workflow_extraction.utils import strip_label_prefix, strip_code_fences, find_fenced_object


class TestStripLabelPrefix(unittest.TestCase):

    def test_strips_label_and_following_space(self):
        self.assertEqual(strip_label_prefix("THOUGHTS: hi there", "THOUGHTS:"), "hi there")

    def test_ignores_leading_whitespace(self):
        self.assertEqual(strip_label_prefix("\n  THOUGHTS:hi", "THOUGHTS:"), "hi")

    def test_partial_label_reports_nothing(self):
        self.assertEqual(strip_label_prefix("THOU", "THOUGHTS:"), "")

    def test_text_without_label_is_unchanged(self):
        self.assertEqual(strip_label_prefix("Other text", "THOUGHTS:"), "Other text")

    def test_empty_label(self):
        self.assertEqual(strip_label_prefix("THOUGHTS: x", ""), "THOUGHTS: x")


class TestStripCodeFences(unittest.TestCase):

    def test_json_fence(self):
        self.assertEqual(strip_code_fences('```json\n{"a": 1}\n```'), '{"a": 1}')

    def test_bare_fence_on_one_line(self):
        self.assertEqual(strip_code_fences('```{"a":1}```'), '{"a":1}')

    def test_uppercase_tag_with_spaces(self):
        self.assertEqual(strip_code_fences('  ```JSON {"a": 1} ```  '), '{"a": 1}')

    def test_unfenced_text_is_trimmed(self):
        self.assertEqual(strip_code_fences('  {"a": 1}\n'), '{"a": 1}')


class TestFindFencedObject(unittest.TestCase):

    def test_finds_fenced_object(self):
        text = 'Plan:\n```json\n{"a": {"b": 1}}\n```\nDone'
        self.assertEqual(find_fenced_object(text), (6, '{"a": {"b": 1}}'))

    def test_no_fence(self):
        self.assertIsNone(find_fenced_object('Plan: {"a": 1}'))

    def test_unclosed_fence(self):
        self.assertIsNone(find_fenced_object('```json\n{"a": {"b": 1'))


if __name__ == '__main__':
    unittest.main()
