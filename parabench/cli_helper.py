# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import argparse
import pathlib
from typing import List, Tuple

from parabench import env
from parabench.capabilities import (BrowserCapability, CapabilityListBuilder,
                                    parse_capability)
from parabench.exception import ParabenchError


def parse_path(str_value: str) -> pathlib.Path:
  try:
    path = pathlib.Path(str_value).expanduser()
  except RuntimeError as e:
    raise argparse.ArgumentTypeError(f"Invalid Path '{str_value}': {e}") from e
  if not path.exists():
    raise argparse.ArgumentTypeError(f"Path '{path}' does not exist.")
  return path


def parse_existing_file_path(str_value: str) -> pathlib.Path:
  path = parse_path(str_value)
  if not path.is_file():
    raise argparse.ArgumentTypeError(f"Path '{path}' is not a file.")
  return path


def parse_properties_file(str_value: str) -> pathlib.Path:
  path = parse_existing_file_path(str_value)
  try:
    env.load_properties_file(path, properties={})
  except ParabenchError as e:
    raise argparse.ArgumentTypeError(str(e)) from e
  return path


def parse_property(str_value: str) -> Tuple[str, str]:
  try:
    return env.parse_property_assignment(str_value)
  except ParabenchError as e:
    raise argparse.ArgumentTypeError(str(e)) from e


def parse_browser(str_value: str) -> BrowserCapability:
  try:
    return parse_capability(str_value)
  except ParabenchError as e:
    raise argparse.ArgumentTypeError(str(e)) from e


def parse_browser_list(str_value: str) -> List[BrowserCapability]:
  try:
    return CapabilityListBuilder().build(str_value)
  except ParabenchError as e:
    raise argparse.ArgumentTypeError(str(e)) from e
