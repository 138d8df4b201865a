# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import abc
import logging
import os
import pathlib
from typing import Any, Dict, Mapping, MutableMapping, Optional, Tuple

import hjson

from parabench.exception import ConfigurationError

# Process-wide properties, set with -D command line arguments or loaded from a
# properties file.
SYSTEM_PROPERTIES: Dict[str, str] = {}


class ConfigSource(abc.ABC):
  """Read-only view on environment variables and process-wide properties.
  Every lookup hits the underlying storage, nothing is cached."""

  @abc.abstractmethod
  def get_env(self, name: str) -> Optional[str]:
    pass

  @abc.abstractmethod
  def get_property(self, key: str) -> Optional[str]:
    pass

  def bool_property(self, key: str) -> bool:
    value = self.get_property(key)
    if value is None:
      return False
    return value.strip().lower() == "true"


class ProcessConfigSource(ConfigSource):

  def __init__(self,
               environ: Optional[Mapping[str, str]] = None,
               properties: Optional[Mapping[str, str]] = None):
    self._environ = os.environ if environ is None else environ
    self._properties = SYSTEM_PROPERTIES if properties is None else properties

  def get_env(self, name: str) -> Optional[str]:
    return self._environ.get(name)

  def get_property(self, key: str) -> Optional[str]:
    return self._properties.get(key)


class StaticConfigSource(ConfigSource):
  """Fixed environment and properties, used for deterministic resolution
  independent of the real process state."""

  def __init__(self,
               env: Optional[Mapping[str, str]] = None,
               properties: Optional[Mapping[str, str]] = None):
    self._env: Dict[str, str] = dict(env or {})
    self._properties: Dict[str, str] = dict(properties or {})

  def get_env(self, name: str) -> Optional[str]:
    return self._env.get(name)

  def get_property(self, key: str) -> Optional[str]:
    return self._properties.get(key)

  def __repr__(self) -> str:
    return (f"StaticConfigSource(env={sorted(self._env)}, "
            f"properties={sorted(self._properties)})")


def _property_str(key: str, value: Any) -> str:
  if isinstance(value, bool):
    return "true" if value else "false"
  if isinstance(value, (str, int, float)):
    return str(value)
  raise ConfigurationError(
      f"Property '{key}' must be a string, number or bool, got: {value!r}")


def parse_property_assignment(value: str) -> Tuple[str, str]:
  key, sep, property_value = value.partition("=")
  key = key.strip()
  if not key:
    raise ConfigurationError(f"Invalid property assignment: '{value}'")
  if not sep:
    # "-Dfoo" behaves like "-Dfoo=true"
    return key, "true"
  return key, property_value


def load_properties_file(
    path: pathlib.Path,
    properties: Optional[MutableMapping[str, str]] = None) -> Dict[str, str]:
  """Read a flat hjson object of property key/value pairs and merge it into
  |properties| (SYSTEM_PROPERTIES by default). Returns the parsed values."""
  if properties is None:
    properties = SYSTEM_PROPERTIES
  with path.open(encoding="utf-8") as f:
    try:
      data = hjson.load(f)
    except ValueError as e:
      raise ConfigurationError(
          f"Invalid {hjson.__name__} properties file: {path}: {e}") from e
  if not isinstance(data, Mapping):
    raise ConfigurationError(
        f"Properties file {path} must contain an object, got {type(data)}")
  loaded = {key: _property_str(key, value) for key, value in data.items()}
  logging.debug("Loaded %d properties from %s", len(loaded), path)
  properties.update(loaded)
  return loaded
