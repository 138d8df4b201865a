# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Optional Sauce Connect integration.

The tunnel support ships separately. Callers register it explicitly through
SaucePlugins. When a plugin is missing, or fails, parabench logs a warning and
continues without a tunnel identifier.
"""

from __future__ import annotations

import abc
import dataclasses
import logging
from typing import Any, Optional


class TunnelIdProvider(abc.ABC):

  @abc.abstractmethod
  def get_tunnel_identifier(self, options: str,
                            default: Optional[str]) -> Optional[str]:
    """Extract the tunnel identifier from a sauce options string, returns
    |default| if there is none."""


@dataclasses.dataclass(frozen=True)
class SaucePlugins:
  tunnel_id_provider: Optional[TunnelIdProvider] = None
  # Opaque handle of the sauce-connect tunnel manager, only checked for
  # presence.
  tunnel_manager: Optional[Any] = None


NO_PLUGINS = SaucePlugins()


@dataclasses.dataclass(frozen=True)
class TunnelIdResult:
  value: Optional[str] = None
  error: Optional[Exception] = None

  @property
  def is_success(self) -> bool:
    return self.error is None


def probe_tunnel_id(provider: TunnelIdProvider,
                    sauce_options: str) -> TunnelIdResult:
  try:
    return TunnelIdResult(provider.get_tunnel_identifier(sauce_options, None))
  except Exception as e:  # pylint: disable=broad-except
    return TunnelIdResult(error=e)


def resolve_tunnel_id(sauce_options: Optional[str],
                      provider: Optional[TunnelIdProvider]) -> Optional[str]:
  if sauce_options is None:
    return None
  if provider is None:
    logging.warning(
        "Sauce options defined, but no tunnel identifier provider is "
        "registered. Are you missing a Sauce Labs dependency?")
    return None
  result = probe_tunnel_id(provider, sauce_options)
  if not result.is_success:
    logging.warning(
        "Sauce options defined, but failed to get tunnel identifier.")
    logging.debug("Tunnel identifier provider raised: %r", result.error)
    return None
  return result.value


def check_tunnel_manager(plugins: SaucePlugins) -> bool:
  if plugins.tunnel_manager is not None:
    return True
  logging.warning("Tests are configured for Sauce Labs, but the sauce-connect "
                  "tunnel manager seems to be missing.")
  return False
