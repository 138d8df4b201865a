# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Markers for test classes and test methods.

  @run_on_hub("grid.example.com")
  class MyTest(ParallelTestCase):

    @run_locally(Browser.SAFARI, "11")
    def test_login(self):
      ...

discover_overrides() turns the markers into a PerTestOverrides value, the
selector itself never looks at test classes.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, Union

from parabench.capabilities import Browser
from parabench.selector import PerTestOverrides, RunLocally, RunOnHub

RUN_LOCALLY_ATTR = "__parabench_run_locally__"
RUN_ON_HUB_ATTR = "__parabench_run_on_hub__"

MarkedT = TypeVar("MarkedT")


class _RunLocallyMarker:

  def __init__(self, browser: Optional[Browser], version: str):
    self.browser = browser
    self.version = version

  def to_override(self) -> Optional[RunLocally]:
    if self.browser is None:
      return None
    return RunLocally(self.browser, self.version)


def run_locally(browser: Optional[Union[Browser, str]] = None,
                version: str = "") -> Callable[[MarkedT], MarkedT]:
  if isinstance(browser, str) and not isinstance(browser, Browser):
    browser = Browser.parse(browser)
  marker = _RunLocallyMarker(browser, version)

  def decorator(target: MarkedT) -> MarkedT:
    setattr(target, RUN_LOCALLY_ATTR, marker)
    return target

  return decorator


def run_on_hub(hostname: str) -> Callable[[MarkedT], MarkedT]:
  assert hostname, "run_on_hub requires a hostname"

  def decorator(target: MarkedT) -> MarkedT:
    setattr(target, RUN_ON_HUB_ATTR, RunOnHub(hostname))
    return target

  return decorator


def _marker(target: Any, attr: str) -> Any:
  if target is None:
    return None
  return getattr(target, attr, None)


def discover_overrides(test_cls: type,
                       method_name: Optional[str] = None) -> PerTestOverrides:
  method = getattr(test_cls, method_name, None) if method_name else None
  class_run_locally: Optional[_RunLocallyMarker] = _marker(
      test_cls, RUN_LOCALLY_ATTR)
  run_locally_marker: Optional[_RunLocallyMarker] = (
      _marker(method, RUN_LOCALLY_ATTR) or class_run_locally)
  run_on_hub_value: Optional[RunOnHub] = (
      _marker(method, RUN_ON_HUB_ATTR) or _marker(test_cls, RUN_ON_HUB_ATTR))
  return PerTestOverrides(
      run_locally=run_locally_marker.to_override()
      if run_locally_marker else None,
      run_on_hub=run_on_hub_value,
      class_runs_locally=class_run_locally is not None)
