"""Tester CLI - validate configs and inspect node info."""

import argparse
import json
import logging
import sys

import yaml
from pydantic import ValidationError

from common.models.node import parse_node_info
from eksconfig.config import Config
from eksconfig.env import env_var_names, update_from_envs
from eksconfig.errors import ConfigError
from eksconfig.settings import get_settings

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def cmd_validate(args):
    """Validate a config file and fill in defaults."""
    try:
        cfg = update_from_envs(Config.load(args.config))
        cfg.validate_and_set_defaults()
    except (ConfigError, ValidationError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not args.dry_run:
        cfg.sync()

    print(f"Config: {cfg.name} ({cfg.config_path})")
    addon = cfg.add_on_secrets_remote
    if addon is None:
        print("AddOnSecretsRemote: disabled")
        return

    print(f"AddOnSecretsRemote: namespace={addon.namespace} image={addon.image_uri(cfg.region)}")
    print(f"  {addon.deployment_replicas} replicas x {addon.objects} objects x {addon.object_size} bytes")
    print(f"  s3://{cfg.s3_bucket_name}/{addon.s3_dir}")
    for operation in ("writes", "reads"):
        for local_path, key in addon.artifacts(operation).paired_paths():
            print(f"  {local_path:<70} -> {key}")


def cmd_node_info(args):
    """Parse node system info records."""
    try:
        with open(args.file, 'r') as f:
            data = json.load(f)

        records = data if isinstance(data, list) else [data]
        nodes = [parse_node_info(record) for record in records]
    except (ValidationError, OSError, json.JSONDecodeError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(json.dumps([node.model_dump(by_alias=True) for node in nodes], indent=2))


def cmd_env(args):
    """List environment variables."""
    for name in env_var_names():
        print(name)


def main():
    parser = argparse.ArgumentParser(
        description="Cluster load tester configuration tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate config and set defaults")
    validate_parser.add_argument("config", help="Path to config YAML")
    validate_parser.add_argument("--dry-run", action="store_true", help="Do not write the config back")
    validate_parser.set_defaults(func=cmd_validate)

    # node-info
    node_parser = subparsers.add_parser("node-info", help="Parse node system info JSON")
    node_parser.add_argument("file", help="JSON file with one record or a list")
    node_parser.set_defaults(func=cmd_node_info)

    # env
    env_parser = subparsers.add_parser("env", help="List supported environment variables")
    env_parser.set_defaults(func=cmd_env)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging()
    logger.debug(f"Running command: {args.command}")
    args.func(args)


if __name__ == "__main__":
    main()
