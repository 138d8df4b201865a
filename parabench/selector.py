# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import dataclasses
import enum
import logging
from typing import Any, Dict, Final, Optional, Union

from parabench.capabilities import Browser
from parabench.credentials import CredentialResolver, Credentials
from parabench.env import ConfigSource
from parabench.exception import ConfigurationError
from parabench.hub import HubAddressBuilder
from parabench.parameters import Parameters
from parabench.tunnel import NO_PLUGINS, SaucePlugins, check_tunnel_manager

FALLBACK_BROWSER: Final = Browser.CHROME
LOCALHOST: Final[str] = "localhost"


class TargetKind(enum.Enum):
  LOCAL = "local"
  LOCAL_DEFAULT = "local-default"
  REMOTE_SAUCE = "remote-sauce"
  REMOTE_HUB = "remote-hub"
  FALLBACK_LOCAL = "fallback-local"


@dataclasses.dataclass(frozen=True)
class RunLocally:
  browser: Browser
  version: str = ""


@dataclasses.dataclass(frozen=True)
class RunOnHub:
  hostname: str


@dataclasses.dataclass(frozen=True)
class PerTestOverrides:
  run_locally: Optional[RunLocally] = None
  run_on_hub: Optional[RunOnHub] = None
  # A class level run-locally marker, independent of run_locally.
  class_runs_locally: bool = False


NO_OVERRIDES: Final = PerTestOverrides()


@dataclasses.dataclass(frozen=True)
class LocalTarget:
  browser: Browser
  version: str = ""
  kind: TargetKind = TargetKind.LOCAL

  @property
  def is_remote(self) -> bool:
    return False

  def to_json(self) -> Dict[str, Any]:
    return {
        "kind": self.kind.value,
        "browser": self.browser.name.lower(),
        "version": self.version
    }


@dataclasses.dataclass(frozen=True)
class RemoteHubTarget:
  url: str
  kind: TargetKind = TargetKind.REMOTE_HUB

  @property
  def is_remote(self) -> bool:
    return True

  def to_json(self) -> Dict[str, Any]:
    return {"kind": self.kind.value, "url": self.url}


@dataclasses.dataclass(frozen=True)
class FallbackLocalTarget:
  browser: Browser = FALLBACK_BROWSER
  kind: TargetKind = dataclasses.field(
      default=TargetKind.FALLBACK_LOCAL, init=False)

  @property
  def is_remote(self) -> bool:
    return False

  @property
  def version(self) -> str:
    return ""

  def to_json(self) -> Dict[str, Any]:
    return {"kind": self.kind.value, "browser": self.browser.name.lower()}


DriverTarget = Union[LocalTarget, RemoteHubTarget, FallbackLocalTarget]


class DriverTargetSelector:
  """Decides where the browser for a single test runs.

  The rules are checked in order, the first match wins:
    1. an explicit run-locally override for the test,
    2. the global "use local webdriver" flag,
    3. Sauce Labs credentials (username and access key),
    4. a hub from a run-on-hub override or the global hub hostname,
    5. a local Chrome as last resort.
  """

  def __init__(self,
               config: ConfigSource,
               plugins: SaucePlugins = NO_PLUGINS,
               hub_builder: Optional[HubAddressBuilder] = None):
    self._parameters = Parameters(config)
    self._credentials = CredentialResolver(config)
    self._plugins = plugins
    self._hub_builder = hub_builder or HubAddressBuilder()

  @property
  def parameters(self) -> Parameters:
    return self._parameters

  def select(self, overrides: PerTestOverrides = NO_OVERRIDES) -> DriverTarget:
    if overrides.run_locally is not None:
      run_locally = overrides.run_locally
      logging.debug("Running locally on %s %s", run_locally.browser,
                    run_locally.version)
      return LocalTarget(run_locally.browser, run_locally.version)

    if self._parameters.is_local_web_driver_used:
      local_browser = self._parameters.local_browser
      logging.debug("Local webdriver requested, using %s", local_browser)
      return LocalTarget(local_browser.name, local_browser.version or "",
                         TargetKind.LOCAL_DEFAULT)

    credentials = self._credentials.resolve_credentials()
    if credentials.is_valid:
      check_tunnel_manager(self._plugins)
      url = self.hub_url(overrides, credentials)
      return RemoteHubTarget(url, TargetKind.REMOTE_SAUCE)

    if (overrides.run_on_hub is not None or
        self._parameters.hub_hostname is not None):
      url = self.hub_url(overrides, credentials)
      return RemoteHubTarget(url, TargetKind.REMOTE_HUB)

    logging.info("Did not find a configuration to run locally, on Sauce Labs "
                 "or on other test grid. Falling back to running locally on "
                 "Chrome.")
    return FallbackLocalTarget(FALLBACK_BROWSER)

  def hub_url(self, overrides: PerTestOverrides,
              credentials: Optional[Credentials] = None) -> str:
    if credentials is None:
      credentials = self._credentials.resolve_credentials()
    if credentials.is_valid:
      # The tunnel endpoint does not depend on any hostname.
      return self._hub_builder.build(credentials,
                                     self.find_hub_hostname(overrides))
    return self._hub_builder.build(None, self.hub_hostname(overrides))

  def find_hub_hostname(self, overrides: PerTestOverrides) -> Optional[str]:
    hub_hostname = self._parameters.hub_hostname
    if hub_hostname is not None:
      return hub_hostname
    if overrides.run_locally is None and overrides.class_runs_locally:
      return LOCALHOST
    if overrides.run_on_hub is not None:
      return overrides.run_on_hub.hostname
    return None

  def hub_hostname(self, overrides: PerTestOverrides) -> str:
    hostname = self.find_hub_hostname(overrides)
    if not hostname:
      raise ConfigurationError(
          "Could not determine the hub hostname: set the "
          "parabench.hubHostname property or use a run_on_hub marker.")
    return hostname
