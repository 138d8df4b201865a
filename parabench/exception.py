# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations


class ParabenchError(Exception):
  pass


class ParseError(ParabenchError, ValueError):
  """Raised for malformed browser capability tokens."""


class ConfigurationError(ParabenchError):
  """Raised when the combined configuration cannot produce a driver target,
  for instance a remote hub without any resolvable hostname."""
