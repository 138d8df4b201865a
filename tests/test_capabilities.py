# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import sys
import unittest

import pytest

from parabench.capabilities import (DEFAULT_BROWSER_CONFIGURATION,
                                    DEFAULT_CAPABILITY, Browser,
                                    BrowserCapability, CapabilityListBuilder,
                                    default_capabilities, parse_capability)
from parabench.exception import ParseError


class BrowserTestCase(unittest.TestCase):

  def test_parse(self):
    self.assertEqual(Browser.parse("chrome"), Browser.CHROME)
    self.assertEqual(Browser.parse(" Firefox "), Browser.FIREFOX)
    self.assertEqual(Browser.parse("SAFARI"), Browser.SAFARI)
    self.assertEqual(Browser.parse("edge"), Browser.EDGE)
    self.assertEqual(Browser.parse("ie"), Browser.IE)

  def test_parse_invalid(self):
    with self.assertRaises(ParseError) as cm:
      Browser.parse("netscape")
    self.assertIn("netscape", str(cm.exception))
    with self.assertRaises(ParseError):
      Browser.parse("  ")
    # Only member names are accepted, not the webdriver browserName.
    with self.assertRaises(ParseError):
      Browser.parse("MicrosoftEdge")

  def test_parse_error_is_value_error(self):
    with self.assertRaises(ValueError):
      Browser.parse("unknown")

  def test_str(self):
    self.assertEqual(str(Browser.EDGE), "MicrosoftEdge")
    self.assertEqual(str(Browser.IE), "internet explorer")


class BrowserCapabilityTestCase(unittest.TestCase):

  def test_equality(self):
    self.assertEqual(
        BrowserCapability(Browser.CHROME, "67"),
        BrowserCapability(Browser.CHROME, "67"))
    self.assertNotEqual(
        BrowserCapability(Browser.CHROME, "67"),
        BrowserCapability(Browser.CHROME))
    self.assertNotEqual(
        BrowserCapability(Browser.CHROME), BrowserCapability(Browser.FIREFOX))

  def test_immutable(self):
    capability = BrowserCapability(Browser.CHROME)
    with self.assertRaises(AttributeError):
      capability.version = "1"

  def test_label(self):
    self.assertEqual(BrowserCapability(Browser.CHROME).label, "chrome")
    self.assertEqual(
        str(BrowserCapability(Browser.FIREFOX, "102")), "firefox-102")

  def test_to_capabilities(self):
    self.assertDictEqual(
        BrowserCapability(Browser.EDGE).to_capabilities(),
        {"browserName": "MicrosoftEdge"})
    self.assertDictEqual(
        BrowserCapability(Browser.CHROME,
                          "67").to_capabilities(tunnelIdentifier="tunnel"), {
                              "browserName": "chrome",
                              "browserVersion": "67",
                              "tunnelIdentifier": "tunnel"
                          })


class ParseCapabilityTestCase(unittest.TestCase):

  def test_name_only(self):
    self.assertEqual(
        parse_capability("firefox"), BrowserCapability(Browser.FIREFOX))

  def test_version(self):
    self.assertEqual(
        parse_capability(" chrome - 67 "),
        BrowserCapability(Browser.CHROME, "67"))

  def test_version_verbatim(self):
    self.assertEqual(
        parse_capability("chrome-67-beta"),
        BrowserCapability(Browser.CHROME, "67-beta"))
    self.assertEqual(
        parse_capability("safari-latest"),
        BrowserCapability(Browser.SAFARI, "latest"))

  def test_empty_version(self):
    self.assertEqual(
        parse_capability("chrome-"), BrowserCapability(Browser.CHROME))

  def test_invalid(self):
    with self.assertRaises(ParseError):
      parse_capability("")
    with self.assertRaises(ParseError):
      parse_capability("-67")
    with self.assertRaises(ParseError):
      parse_capability("opera-12")


class CapabilityListBuilderTestCase(unittest.TestCase):

  def test_absent(self):
    capabilities = CapabilityListBuilder().build(None)
    self.assertListEqual(capabilities, [BrowserCapability(Browser.CHROME)])
    self.assertListEqual(capabilities, [DEFAULT_BROWSER_CONFIGURATION])

  def test_custom_default(self):
    builder = CapabilityListBuilder(BrowserCapability(Browser.SAFARI, "11"))
    self.assertListEqual(
        builder.build(None), [BrowserCapability(Browser.SAFARI, "11")])

  def test_single(self):
    self.assertListEqual(
        CapabilityListBuilder().build("firefox"),
        [BrowserCapability(Browser.FIREFOX)])

  def test_list(self):
    self.assertListEqual(
        CapabilityListBuilder().build("chrome-67,firefox"), [
            BrowserCapability(Browser.CHROME, "67"),
            BrowserCapability(Browser.FIREFOX, None)
        ])

  def test_order_and_duplicates(self):
    self.assertListEqual(
        CapabilityListBuilder().build("safari-11, chrome ,safari-11,edge-18"),
        [
            BrowserCapability(Browser.SAFARI, "11"),
            BrowserCapability(Browser.CHROME),
            BrowserCapability(Browser.SAFARI, "11"),
            BrowserCapability(Browser.EDGE, "18"),
        ])

  def test_invalid(self):
    with self.assertRaises(ParseError):
      CapabilityListBuilder().build("chrome,unknown")
    with self.assertRaises(ParseError):
      CapabilityListBuilder().build("chrome,,firefox")
    with self.assertRaises(ParseError):
      CapabilityListBuilder().build("")


class DefaultCapabilitiesTestCase(unittest.TestCase):

  def test_default_capabilities(self):
    self.assertListEqual(default_capabilities(),
                         [BrowserCapability(Browser.FIREFOX)])
    self.assertListEqual(default_capabilities(), [DEFAULT_CAPABILITY])

  def test_defaults_are_distinct(self):
    self.assertNotEqual(DEFAULT_CAPABILITY, DEFAULT_BROWSER_CONFIGURATION)
    self.assertEqual(DEFAULT_BROWSER_CONFIGURATION.name, Browser.CHROME)


if __name__ == "__main__":
  sys.exit(pytest.main([__file__]))
