#!/usr/bin/env python3
"""
mongo_automation/cli/build_config.py

Build the automation config for a replica set from settings and the previously
deployed document:

    python -m mongo_automation.cli.build_config \
      --config deployment.yaml \
      --previous automation-config.json \
      --output automation-config.json

Deployment parameters come from `MONGODB_*` environment variables, overridden
by the optional YAML file. A missing --previous file is treated as "nothing
deployed yet". The result goes to --output (format from its suffix) or to
stdout (format from --format).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from mongo_automation.auth import enabler_from_settings
from mongo_automation.automation.factory import configure_builder
from mongo_automation.errors import AutomationConfigError
from mongo_automation.models.automation_config import AutomationConfig
from mongo_automation.settings import ReplicaSetSettings
from mongo_automation.utils.documents import (
    load_automation_config,
    render_automation_config,
    write_automation_config,
)

logger = logging.getLogger(__name__)


def _load_settings(config_path: Optional[str]) -> ReplicaSetSettings:
    if config_path is None:
        return ReplicaSetSettings()
    with open(config_path, "r", encoding="utf-8") as f:
        return ReplicaSetSettings.from_yaml(f.read())


def _build(args: argparse.Namespace) -> None:
    settings = _load_settings(args.config)
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    previous = (
        load_automation_config(args.previous) if args.previous else AutomationConfig()
    )
    builder = configure_builder(settings, enabler_from_settings(settings), previous)
    config = builder.build()

    if args.output:
        write_automation_config(config, args.output)
        logger.info(
            "Wrote automation config version %d to %s", config.version, args.output
        )
    else:
        sys.stdout.write(
            render_automation_config(config, yaml_format=args.format == "yaml")
        )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a MongoDB replica-set automation config."
    )
    parser.add_argument(
        "--config", default=None, help="YAML file with deployment settings."
    )
    parser.add_argument(
        "--previous",
        default=None,
        help="Previously deployed automation config (JSON or YAML).",
    )
    parser.add_argument(
        "--output", default=None, help="Write the result here instead of stdout."
    )
    parser.add_argument("--format", choices=["json", "yaml"], default="json")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    try:
        _build(args)
    except (AutomationConfigError, ValueError, yaml.YAMLError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
