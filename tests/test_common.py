#!/usr/bin/env python3

"""Unit tests for the common module."""

import os
import unittest
from unittest.mock import patch

from commitmcp.common import normalize_file_path, one_line, repository_lock


class CommonTest(unittest.TestCase):
    def test_normalize_file_path_tilde_expansion(self):
        with patch("os.path.expanduser") as mock_expanduser:
            mock_expanduser.side_effect = lambda p: p.replace("~", "/home/testuser")

            result = normalize_file_path("~/test_dir")

            mock_expanduser.assert_called_with("~/test_dir")
            self.assertEqual(result, "/home/testuser/test_dir")

    def test_normalize_file_path_defaults_to_cwd(self):
        with patch("os.getcwd", return_value="/current/dir"):
            self.assertEqual(normalize_file_path(None), "/current/dir")
            self.assertEqual(normalize_file_path(""), "/current/dir")
            self.assertEqual(normalize_file_path("."), "/current/dir")
            self.assertEqual(normalize_file_path("sub"), "/current/dir/sub")

    def test_one_line(self):
        self.assertEqual(one_line("error: a\n\n  hint: b  \n"), "error: a hint: b")
        self.assertEqual(one_line(""), "")

    def test_repository_lock_is_shared_per_root(self):
        here = os.path.abspath(".")
        self.assertIs(repository_lock(here), repository_lock(here + os.sep))
        self.assertIsNot(repository_lock(here), repository_lock(os.path.dirname(here)))


if __name__ == "__main__":
    unittest.main()
