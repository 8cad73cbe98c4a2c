"""
Command-line interface for the postmap package.

Provides an argparse-based CLI with subcommands for validating map request
envelopes and writing a default configuration file.

Usage:
    postmap validate request.json
    postmap validate request.json --max-size 2048x2048 --format yaml
    cat request.json | postmap validate -
    postmap config postmap.yaml
"""

import argparse
import json
import sys
from typing import List, Optional

import yaml

from .api import build_map_config, load_envelope
from .config import Config, parse_size
from .exceptions import PostMapError
from .logging_config import setup_logging


def setup_logging_from_args(args: argparse.Namespace) -> None:
    """
    Configure logging based on command-line arguments.
    
    Args:
        args: Parsed command-line arguments with verbose, quiet, log_file
    """
    if getattr(args, 'quiet', False):
        verbosity = -2  # ERROR
    elif getattr(args, 'verbose', False):
        verbosity = 1  # DEBUG
    else:
        verbosity = -1  # WARNING
    
    # stdout carries the generated configuration
    setup_logging(
        verbosity=verbosity,
        log_file=getattr(args, 'log_file', None),
        stream=sys.stderr
    )


def max_size_arg(value: str) -> str:
    """argparse type for --max-size."""
    try:
        parse_size(value)
    except PostMapError as e:
        raise argparse.ArgumentTypeError(str(e))
    return value


def load_config(args: argparse.Namespace) -> Config:
    """
    Build the Config for a command from --config and --max-size.
    
    Raises:
        PostMapError: If the resulting configuration is invalid
        FileNotFoundError, ValueError: If the config file cannot be loaded
    """
    config_path = getattr(args, 'config', None)
    config = Config.load_from_file(config_path) if config_path else Config()
    
    max_size = getattr(args, 'max_size', None)
    if max_size:
        config.max_width, config.max_height = parse_size(max_size)
    
    config.validate()
    return config


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle 'validate' subcommand."""
    try:
        config = load_config(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading config from {args.config}: {e}", file=sys.stderr)
        return 1
    except PostMapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    try:
        envelope = load_envelope(args.envelope)
        generated = build_map_config(envelope, config)
    except PostMapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    data = generated.to_dict()
    if args.format == "yaml":
        yaml.safe_dump(data, sys.stdout, default_flow_style=False, sort_keys=False)
    else:
        json.dump(data, sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Handle 'config' subcommand."""
    try:
        Config().save_to_file(args.output)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    print(f"Default configuration written to: {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="postmap",
        description="Validate static map requests and print the render configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    
    def _add_logging_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "-v", "--verbose",
            action="store_true",
            help="Enable DEBUG logging"
        )
        p.add_argument(
            "-q", "--quiet",
            action="store_true",
            help="Only log errors (warnings are logged by default)"
        )
        p.add_argument(
            "--log-file",
            type=str,
            help="Write logs to file"
        )
    
    subparsers = parser.add_subparsers(title="commands")
    
    parser_validate = subparsers.add_parser(
        "validate",
        help="Validate a request envelope and print the generated configuration"
    )
    _add_logging_args(parser_validate)
    parser_validate.add_argument(
        "envelope",
        help="Path to the request JSON file, or '-' for stdin"
    )
    parser_validate.add_argument(
        "--config",
        type=str,
        help="Config file path (YAML/JSON)"
    )
    parser_validate.add_argument(
        "--max-size",
        type=max_size_arg,
        help="Maximum output size as WIDTHxHEIGHT (overrides the config file)"
    )
    parser_validate.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)"
    )
    parser_validate.set_defaults(func=cmd_validate)
    
    parser_config = subparsers.add_parser(
        "config",
        help="Write the default configuration to a file"
    )
    _add_logging_args(parser_config)
    parser_config.add_argument(
        "output",
        help="Destination file (.yaml, .yml or .json)"
    )
    parser_config.set_defaults(func=cmd_config)
    
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not hasattr(args, 'func'):
        parser.print_help()
        return 1
    
    setup_logging_from_args(args)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
