# Copyright 2023 The Chromium Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence

import tabulate

from parabench import cli_helper, env, helper
from parabench.capabilities import (BROWSERS_ENV, BrowserCapability,
                                    CapabilityListBuilder)
from parabench.exception import ParabenchError
from parabench.parameters import Parameters
from parabench.selector import (DriverTarget, DriverTargetSelector,
                                PerTestOverrides, RunLocally, RunOnHub)


class ParabenchCLI:

  def __init__(self):
    self.parser = argparse.ArgumentParser(
        prog="parabench",
        description="Resolve where parallel browser tests run.")
    self._setup_parser()
    self._setup_subparser()

  def _setup_parser(self):
    self._add_verbosity_argument(self.parser)
    # Disable colors by default when piped to a file.
    has_color = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
    self.parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=has_color,
        help="Disable colored output")

  def _add_verbosity_argument(self, parser):
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbosity",
        action="count",
        default=0,
        help="Increase output verbosity (0..2)")

  def _setup_subparser(self):
    self.subparsers = self.parser.add_subparsers(
        title="Subcommands", dest="subcommand", required=True)
    self._setup_resolve_subparser()
    self._setup_browsers_subparser()

  def _setup_resolve_subparser(self):
    subparser = self.subparsers.add_parser(
        "resolve",
        aliases=["target"],
        help="Print the driver target a test would use.")
    subparser.set_defaults(subcommand=self.resolve_subcommand)
    self._add_verbosity_argument(subparser)
    subparser.add_argument(
        "--run-locally",
        type=cli_helper.parse_browser,
        metavar="NAME[-VERSION]",
        help="Simulate a run_locally marker on the test.")
    subparser.add_argument(
        "--run-on-hub",
        metavar="HOSTNAME",
        help="Simulate a run_on_hub marker on the test.")
    subparser.add_argument(
        "--class-run-locally",
        action="store_true",
        help="Simulate a class level run_locally marker without browser.")
    self._add_property_arguments(subparser)
    subparser.add_argument(
        "--json",
        default=False,
        action="store_true",
        help="Print the target as json.")

  def _setup_browsers_subparser(self):
    subparser = self.subparsers.add_parser(
        "browsers", help="Print the browser configurations tests run with.")
    subparser.set_defaults(subcommand=self.browsers_subcommand)
    self._add_verbosity_argument(subparser)
    subparser.add_argument(
        "--browsers",
        type=cli_helper.parse_browser_list,
        help=("Comma-separated list of NAME[-VERSION] entries. "
              f"Defaults to the {BROWSERS_ENV} environment variable."))
    subparser.add_argument(
        "--json",
        default=False,
        action="store_true",
        help="Print the browser configurations as json.")

  def _add_property_arguments(self, parser):
    parser.add_argument(
        "--properties",
        type=cli_helper.parse_properties_file,
        help="hjson file with property key/value pairs.")
    parser.add_argument(
        "-D",
        dest="property_overrides",
        type=cli_helper.parse_property,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Set a property, takes priority over --properties.")

  def _get_properties(self, args: argparse.Namespace) -> Dict[str, str]:
    properties: Dict[str, str] = dict(env.SYSTEM_PROPERTIES)
    if args.properties:
      env.load_properties_file(args.properties, properties)
    for key, value in args.property_overrides:
      properties[key] = value
    return properties

  def _get_overrides(self, args: argparse.Namespace) -> PerTestOverrides:
    run_locally: Optional[RunLocally] = None
    if args.run_locally:
      capability: BrowserCapability = args.run_locally
      run_locally = RunLocally(capability.name, capability.version or "")
    run_on_hub: Optional[RunOnHub] = None
    if args.run_on_hub:
      run_on_hub = RunOnHub(args.run_on_hub)
    return PerTestOverrides(run_locally, run_on_hub, args.class_run_locally)

  def resolve_subcommand(self, args: argparse.Namespace):
    config = env.ProcessConfigSource(properties=self._get_properties(args))
    target: DriverTarget = DriverTargetSelector(config).select(
        self._get_overrides(args))
    if args.json:
      print(json.dumps(target.to_json(), indent=2))
      return
    rows = [(key, value) for key, value in target.to_json().items()]
    print(tabulate.tabulate(rows, tablefmt="plain"))

  def browsers_subcommand(self, args: argparse.Namespace):
    capabilities: List[BrowserCapability] = args.browsers
    if capabilities is None:
      parameters = Parameters(env.ProcessConfigSource())
      capabilities = CapabilityListBuilder().build(parameters.browsers)
    if args.json:
      data = [capability.to_capabilities() for capability in capabilities]
      print(json.dumps(data, indent=2))
      return
    rows = [(index, capability.name.name.lower(), capability.version or "")
            for index, capability in enumerate(capabilities)]
    print(
        tabulate.tabulate(
            rows, headers=("#", "browser", "version"), tablefmt="simple"))

  def run(self, argv: Sequence[str]):
    args: argparse.Namespace = self.parser.parse_args(argv)
    self._initialize_logging(args)
    try:
      args.subcommand(args)
    except ParabenchError as e:
      logging.debug(e, exc_info=True)
      logging.error("#" * 80)
      logging.error(f"SUBCOMMAND UNSUCCESSFUL got {e.__class__.__name__}:")
      logging.error("-" * 80)
      logging.error(e)
      logging.error("#" * 80)
      sys.exit(1)

  def _initialize_logging(self, args: argparse.Namespace):
    logging.getLogger().setLevel(logging.INFO)
    console_handler = logging.StreamHandler()
    if args.verbosity == 0:
      console_handler.setLevel(logging.INFO)
    elif args.verbosity >= 1:
      console_handler.setLevel(logging.DEBUG)
      logging.getLogger().setLevel(logging.DEBUG)
    console_handler.addFilter(logging.Filter("root"))
    if args.color:
      console_handler.setFormatter(helper.ColoredLogFormatter())
    logging.getLogger().addHandler(console_handler)


def main(argv: Optional[Sequence[str]] = None):
  ParabenchCLI().run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
  main()
