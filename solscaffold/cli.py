#!/usr/bin/env python3
"""Command line entry point: scaffold forge test files and module routers."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import find_dotenv, load_dotenv

from solscaffold.config.logging_config import get_cli_logger
from solscaffold.config.settings import load_project_paths, load_router_config
from solscaffold.errors import GenerateError
from solscaffold.helpers.compiler import build_project
from solscaffold.router.builder import build_router, write_router
from solscaffold.scaffold import write_test_file

logger = logging.getLogger(__name__)


def cmd_test(args: argparse.Namespace) -> int:
    try:
        paths = load_project_paths(args.root)
        test_path = write_test_file(paths, args.contract_name)
        print(f"Generated test file: {test_path}")
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_router(args: argparse.Namespace) -> int:
    try:
        paths = load_project_paths(args.root)
        config = load_router_config(args.deployer, args.salt)
        logger.debug(f"Deployer {config.deployer}, salt 0x{config.salt.hex()}")

        if args.skip_build:
            logger.info("Skipping forge build, using existing artifacts")
        else:
            build_project(paths.root, paths.routers_dir)

        content = build_router(paths, config, args.name, args.module_names)
        router_path = write_router(paths, args.name, content)
        print(f"Generated router file: {router_path}")
        return 0
    except GenerateError as e:
        logger.debug("Router generation aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="solscaffold", description="Scaffold forge tests and module routers")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file under ./logs")
    parser.add_argument("--env-file", help="Path to .env file to load before resolving env vars (default ./.env)")
    sub = parser.add_subparsers(dest="cmd")

    # test
    p_test = sub.add_parser("test", help="Scaffold a test file for a contract")
    p_test.add_argument("--contract-name", "-c", required=True, metavar="CONTRACT_NAME", help="Contract name for test generation")
    p_test.add_argument("--root", help="Project root (default: current directory)")
    p_test.set_defaults(func=cmd_test)

    # router
    p_router = sub.add_parser("router", help="Scaffold a router for the given modules")
    p_router.add_argument("--name", required=True, metavar="ROUTER_NAME", help="Router name for router generation")
    p_router.add_argument("--deployer", help="CREATE2 deployer address (env ROUTER_DEPLOYER)")
    p_router.add_argument("--salt", help="32-byte CREATE2 salt (env ROUTER_SALT)")
    p_router.add_argument("--root", help="Project root (default: current directory)")
    p_router.add_argument("--skip-build", action="store_true", help="Use existing artifacts instead of running forge build")
    p_router.add_argument("module_names", nargs="+", metavar="MODULE", help="Module contract names (Name or path/File.sol:Name)")
    p_router.set_defaults(func=cmd_router)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    load_dotenv(args.env_file or find_dotenv(usecwd=True))
    get_cli_logger(verbose=args.verbose, log_file=args.log_file)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
