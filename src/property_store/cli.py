#!/usr/bin/env python3
"""
Property store console CLI.
Builds a seeded registry from configuration and hands it to the command loop.
"""

from __future__ import annotations

import argparse
import sys

from .console import PropertyConsole
from .main import build_registry, default_config_path, load_config, setup_logging
from .models import StoreConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactive console for a typed property store",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", help="Path to config YAML (defaults to ./property_store.yaml if present)")
    parser.add_argument("--store-name", help="Display name of the storage")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-file", help="Log file location")
    parser.add_argument("--prompt", help="Prompt printed before each command")
    parser.add_argument("--no-seed", action="store_true", help="Start with an empty storage")
    return parser


def apply_overrides(config: StoreConfig, args: argparse.Namespace) -> StoreConfig:
    updates = {}
    if args.store_name is not None:
        updates["store_name"] = args.store_name
    if args.log_level:
        updates["log_level"] = args.log_level
    if args.log_file:
        updates["log_file"] = args.log_file
    if args.prompt is not None:
        updates["prompt"] = args.prompt
    if args.no_seed:
        updates["seed_properties"] = {}

    return config.model_copy(update=updates)


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    config = load_config(args.config or default_config_path())
    config = apply_overrides(config, args)

    setup_logging(config)

    registry = build_registry(config)
    console = PropertyConsole(registry, prompt=config.prompt)
    try:
        return console.run(sys.stdin)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
