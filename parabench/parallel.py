# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import unittest
from typing import Any, ClassVar, Dict, List, Optional

from selenium import webdriver

from parabench import markers
from parabench.capabilities import (BrowserCapability, CapabilityListBuilder,
                                    default_capabilities)
from parabench.env import ConfigSource, ProcessConfigSource
from parabench.launcher import DriverLauncher
from parabench.parameters import Parameters
from parabench.selector import (DriverTarget, DriverTargetSelector,
                                PerTestOverrides)
from parabench.tunnel import NO_PLUGINS, SaucePlugins, resolve_tunnel_id

TUNNEL_IDENTIFIER_CAPABILITY = "tunnelIdentifier"


class ParallelTestCase(unittest.TestCase):
  """Base class for tests that run in one or more browser configurations.

  setUp() resolves where the browser runs, see DriverTargetSelector, and
  starts a webdriver for the desired capability. Use the markers from
  parabench.markers to pin a test to a local browser or a hub.

  Sauce Labs is used when sauce.user and sauce.sauceAccessKey properties or
  SAUCE_USERNAME and SAUCE_ACCESS_KEY environment variables are set. If both
  a property and an environment variable are set, the property wins.
  """

  PLUGINS: ClassVar[SaucePlugins] = NO_PLUGINS
  LAUNCHER: ClassVar[DriverLauncher] = DriverLauncher()

  driver: webdriver.Remote
  target: DriverTarget

  def __init__(self, methodName: str = "runTest"):
    super().__init__(methodName)
    self._desired_capability: Optional[BrowserCapability] = None
    self._extra_capabilities: Dict[str, Any] = {}

  @classmethod
  def config_source(cls) -> ConfigSource:
    return ProcessConfigSource()

  @classmethod
  def browser_configuration(cls) -> List[BrowserCapability]:
    parameters = Parameters(cls.config_source())
    return CapabilityListBuilder().build(parameters.browsers)

  @classmethod
  def default_capabilities(cls) -> List[BrowserCapability]:
    return default_capabilities()

  def selector(self) -> DriverTargetSelector:
    return DriverTargetSelector(self.config_source(), self.PLUGINS)

  def overrides(self) -> PerTestOverrides:
    return markers.discover_overrides(type(self), self._testMethodName)

  def hub_url(self) -> str:
    return self.selector().hub_url(self.overrides())

  def hub_hostname(self) -> str:
    return self.selector().hub_hostname(self.overrides())

  @property
  def desired_capability(self) -> BrowserCapability:
    if self._desired_capability is None:
      return self.browser_configuration()[0]
    return self._desired_capability

  @property
  def extra_capabilities(self) -> Dict[str, Any]:
    return dict(self._extra_capabilities)

  def set_desired_capability(self, capability: BrowserCapability) -> None:
    self._desired_capability = capability
    self._extra_capabilities.pop(TUNNEL_IDENTIFIER_CAPABILITY, None)
    sauce_options = self.selector().parameters.sauce_options
    tunnel_id = resolve_tunnel_id(sauce_options,
                                  self.PLUGINS.tunnel_id_provider)
    if tunnel_id is not None:
      self._extra_capabilities[TUNNEL_IDENTIFIER_CAPABILITY] = tunnel_id

  def setUp(self) -> None:
    super().setUp()
    if self._desired_capability is None:
      self.set_desired_capability(self.desired_capability)
    self.target = self.selector().select(self.overrides())
    self.driver = self.LAUNCHER.launch(self.target, self.desired_capability,
                                       **self._extra_capabilities)
    self.addCleanup(self.driver.quit)
