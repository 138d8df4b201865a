# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Type

import selenium.common.exceptions
from selenium import webdriver
from selenium.webdriver.common.options import ArgOptions

from parabench.capabilities import Browser, BrowserCapability
from parabench.exception import ParabenchError
from parabench.selector import (DriverTarget, FallbackLocalTarget, LocalTarget,
                                RemoteHubTarget)


class WebdriverException(ParabenchError):
  pass


WEB_DRIVER_OPTIONS: Dict[Browser, Type[ArgOptions]] = {
    Browser.CHROME: webdriver.ChromeOptions,
    Browser.FIREFOX: webdriver.FirefoxOptions,
    Browser.SAFARI: webdriver.SafariOptions,
    Browser.EDGE: webdriver.EdgeOptions,
    Browser.IE: webdriver.IeOptions,
}

WEB_DRIVERS: Dict[Browser, Callable[..., webdriver.Remote]] = {
    Browser.CHROME: webdriver.Chrome,
    Browser.FIREFOX: webdriver.Firefox,
    Browser.SAFARI: webdriver.Safari,
    Browser.EDGE: webdriver.Edge,
    Browser.IE: webdriver.Ie,
}


def create_options(capability: BrowserCapability, **extra: Any) -> ArgOptions:
  options = WEB_DRIVER_OPTIONS[capability.name]()
  if capability.version:
    options.browser_version = capability.version
  for name, value in extra.items():
    options.set_capability(name, value)
  return options


class DriverLauncher:
  """Starts selenium webdrivers for a resolved DriverTarget."""

  def launch_local(self,
                   browser: Browser,
                   version: Optional[str] = None) -> webdriver.Remote:
    capability = BrowserCapability(browser, version or None)
    logging.info("Starting local %s webdriver", capability)
    options = create_options(capability)
    try:
      return WEB_DRIVERS[browser](options=options)
    except selenium.common.exceptions.WebDriverException as e:
      raise WebdriverException(
          f"Could not start local webdriver for {capability}") from e

  def launch_remote(self,
                    url: str,
                    capability: BrowserCapability,
                    **extra_capabilities: Any) -> webdriver.Remote:
    logging.info("Starting remote %s webdriver", capability)
    logging.debug("Remote webdriver hub: %s", url)
    options = create_options(capability, **extra_capabilities)
    try:
      return webdriver.Remote(command_executor=url, options=options)
    except selenium.common.exceptions.WebDriverException as e:
      # Do not leak credentials embedded in the hub url.
      raise WebdriverException(
          f"Could not start remote webdriver for {capability}") from e

  def launch(self, target: DriverTarget, capability: BrowserCapability,
             **extra_capabilities: Any) -> webdriver.Remote:
    if isinstance(target, RemoteHubTarget):
      return self.launch_remote(target.url, capability, **extra_capabilities)
    if isinstance(target, (LocalTarget, FallbackLocalTarget)):
      return self.launch_local(target.browser, target.version)
    raise TypeError(f"Unknown driver target: {target}")
