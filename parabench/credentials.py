# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import dataclasses
import logging
from typing import Final, Optional

from parabench.env import ConfigSource

SAUCE_USERNAME_ENV: Final[str] = "SAUCE_USERNAME"
SAUCE_USERNAME_PROP: Final[str] = "sauce.user"
SAUCE_ACCESS_KEY_ENV: Final[str] = "SAUCE_ACCESS_KEY"
SAUCE_ACCESS_KEY_PROP: Final[str] = "sauce.sauceAccessKey"


@dataclasses.dataclass(frozen=True)
class Credentials:
  username: Optional[str] = None
  access_key: Optional[str] = None

  @property
  def is_valid(self) -> bool:
    return bool(self.username) and bool(self.access_key)

  def __repr__(self) -> str:
    access_key = None if self.access_key is None else "***"
    return f"Credentials(username={self.username!r}, access_key={access_key})"


class CredentialResolver:

  def __init__(self, config: ConfigSource):
    self._config = config

  def resolve(self, property_key: str, env_key: str) -> Optional[str]:
    """Property values take priority over environment variables."""
    env = self._config.get_env(env_key)
    prop = self._config.get_property(property_key)
    return prop if prop is not None else env

  def username(self) -> Optional[str]:
    username = self.resolve(SAUCE_USERNAME_PROP, SAUCE_USERNAME_ENV)
    if username is None:
      logging.debug(
          "You can give a Sauce Labs user name using -D%s=<username> "
          "or by %s environment variable.", SAUCE_USERNAME_PROP,
          SAUCE_USERNAME_ENV)
    return username

  def access_key(self) -> Optional[str]:
    access_key = self.resolve(SAUCE_ACCESS_KEY_PROP, SAUCE_ACCESS_KEY_ENV)
    if access_key is None:
      logging.debug(
          "You can give a Sauce Labs access key using -D%s=<accesskey> "
          "or by %s environment variable.", SAUCE_ACCESS_KEY_PROP,
          SAUCE_ACCESS_KEY_ENV)
    return access_key

  def resolve_credentials(self) -> Credentials:
    return Credentials(self.username(), self.access_key())
