# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

from typing import Final, Optional

from parabench.capabilities import (BROWSERS_ENV, Browser, BrowserCapability,
                                    parse_capability)
from parabench.env import ConfigSource

HUB_HOSTNAME_PROP: Final[str] = "parabench.hubHostname"
USE_LOCAL_WEBDRIVER_PROP: Final[str] = "parabench.useLocalWebDriver"
LOCAL_BROWSER_PROP: Final[str] = "parabench.localBrowser"
SAUCE_OPTIONS_PROP: Final[str] = "sauce.options"

DEFAULT_LOCAL_BROWSER: Final = BrowserCapability(Browser.FIREFOX)


class Parameters:
  """Typed accessors for the global parabench settings."""

  def __init__(self, config: ConfigSource):
    self._config = config

  @property
  def config(self) -> ConfigSource:
    return self._config

  @property
  def hub_hostname(self) -> Optional[str]:
    return self._config.get_property(HUB_HOSTNAME_PROP)

  @property
  def is_local_web_driver_used(self) -> bool:
    return self._config.bool_property(USE_LOCAL_WEBDRIVER_PROP)

  @property
  def local_browser(self) -> BrowserCapability:
    value = self._config.get_property(LOCAL_BROWSER_PROP)
    if not value:
      return DEFAULT_LOCAL_BROWSER
    return parse_capability(value)

  @property
  def sauce_options(self) -> Optional[str]:
    return self._config.get_property(SAUCE_OPTIONS_PROP)

  @property
  def browsers(self) -> Optional[str]:
    return self._config.get_env(BROWSERS_ENV)
