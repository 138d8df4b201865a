# Copyright 2022 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import logging
import sys
import unittest

import pytest

from parabench import helper


class ColoredLogFormatterTestCase(unittest.TestCase):

  def record(self, level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("root", level, "/tmp/foo.py", 12, message, None,
                             None)

  def test_info(self):
    formatted = helper.ColoredLogFormatter().format(
        self.record(logging.INFO, "hello"))
    self.assertEqual(formatted,
                     f"{helper.TTYColor.GREEN}hello{helper.TTYColor.RESET}")

  def test_warning(self):
    formatted = helper.ColoredLogFormatter().format(
        self.record(logging.WARNING, "careful"))
    self.assertTrue(formatted.startswith(helper.TTYColor.YELLOW))
    self.assertIn("careful", formatted)

  def test_debug_location(self):
    formatted = helper.ColoredLogFormatter().format(
        self.record(logging.DEBUG, "details"))
    self.assertEqual(formatted, "details (foo.py:12)")


if __name__ == "__main__":
  sys.exit(pytest.main([__file__]))
