# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import dataclasses
from typing import Final, Optional

from parabench.credentials import Credentials
from parabench.exception import ConfigurationError

HUB_SCHEME: Final[str] = "http"
HUB_PATH: Final[str] = "/wd/hub"
HUB_PORT: Final[int] = 4444
# Sauce Connect listens locally and proxies sessions to the Sauce Labs cloud.
TUNNEL_HOST: Final[str] = "localhost"
TUNNEL_PORT: Final[int] = 4445


@dataclasses.dataclass(frozen=True)
class HubAddress:
  host: str
  port: int = HUB_PORT
  scheme: str = HUB_SCHEME
  path: str = HUB_PATH
  credentials: Optional[Credentials] = None

  @property
  def url(self) -> str:
    userinfo = ""
    if self.credentials and self.credentials.is_valid:
      userinfo = (f"{self.credentials.username}:"
                  f"{self.credentials.access_key}@")
    return f"{self.scheme}://{userinfo}{self.host}:{self.port}{self.path}"

  def __str__(self) -> str:
    return self.url


class HubAddressBuilder:

  def __init__(self, scheme: str = HUB_SCHEME):
    self._scheme = scheme

  def address(self, credentials: Optional[Credentials],
              hostname: Optional[str]) -> HubAddress:
    if credentials and credentials.is_valid:
      # The hostname is ignored, sessions always go through the local tunnel.
      return HubAddress(
          TUNNEL_HOST,
          TUNNEL_PORT,
          scheme=self._scheme,
          credentials=credentials)
    if not hostname:
      raise ConfigurationError(
          "Cannot build hub URL without a hub hostname and without "
          "Sauce Labs credentials.")
    return HubAddress(hostname, HUB_PORT, scheme=self._scheme)

  def build(self, credentials: Optional[Credentials],
            hostname: Optional[str]) -> str:
    return self.address(credentials, hostname).url
