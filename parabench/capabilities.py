# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Dict, Final, List, Optional

from parabench.exception import ParseError

BROWSERS_ENV: Final[str] = "PARABENCH_BROWSERS"


class Browser(str, enum.Enum):
  """Supported browsers, the values are the WebDriver browserName strings."""
  CHROME = "chrome"
  FIREFOX = "firefox"
  SAFARI = "safari"
  EDGE = "MicrosoftEdge"
  IE = "internet explorer"

  def __str__(self) -> str:
    return str(self.value)

  @classmethod
  def parse(cls, value: str) -> Browser:
    identifier = value.upper().strip()
    if not identifier:
      raise ParseError(f"Missing browser name in '{value}'")
    try:
      return cls[identifier]
    except KeyError as e:
      choices = ", ".join(browser.name.lower() for browser in cls)
      raise ParseError(f"Unknown browser '{value.strip()}', "
                       f"choices are: {choices}") from e


@dataclasses.dataclass(frozen=True)
class BrowserCapability:
  name: Browser
  version: Optional[str] = None

  @property
  def label(self) -> str:
    if self.version:
      return f"{self.name.name.lower()}-{self.version}"
    return self.name.name.lower()

  def to_capabilities(self, **extra: Any) -> Dict[str, Any]:
    capabilities: Dict[str, Any] = {"browserName": self.name.value}
    if self.version:
      capabilities["browserVersion"] = self.version
    capabilities.update(extra)
    return capabilities

  def __str__(self) -> str:
    return self.label


# Used when no browser list is configured for a test class.
DEFAULT_BROWSER_CONFIGURATION: Final = BrowserCapability(Browser.CHROME)
# Used when a test class does not define a browser configuration at all.
DEFAULT_CAPABILITY: Final = BrowserCapability(Browser.FIREFOX)


def parse_capability(token: str) -> BrowserCapability:
  """Parse a single "name[-version]" token, e.g. "chrome-67" or "firefox"."""
  parts = token.split("-", 1)
  browser = Browser.parse(parts[0])
  version: Optional[str] = None
  if len(parts) > 1:
    version = parts[1].strip() or None
  return BrowserCapability(browser, version)


def default_capabilities() -> List[BrowserCapability]:
  return [DEFAULT_CAPABILITY]


class CapabilityListBuilder:
  """Turns the comma-separated browser list encoding into an ordered list of
  capabilities. Each entry becomes a separate test run, so the order of the
  input tokens is kept and duplicates are not merged."""

  def __init__(self,
               default: BrowserCapability = DEFAULT_BROWSER_CONFIGURATION):
    self._default = default

  @property
  def default(self) -> BrowserCapability:
    return self._default

  def build(self, env_list_value: Optional[str]) -> List[BrowserCapability]:
    if env_list_value is None:
      return [self._default]
    return [parse_capability(token) for token in env_list_value.split(",")]
