"""
Command-line entry point.

Usage:
    warriors-deploy --network optimistic-kovan

Deploys DappCampWarriors and prints ``contract deployed on '<address>'``.
Failures are not caught: the traceback goes to stderr and the exit status
is non-zero.
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .config import selected_network, deployer_private_key, log_level
from .deployer import deploy_dapp_camp_warriors
from .log import configure_logging
from .network import get_network_config, connect, resolve_account


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="warriors-deploy",
        description="Deploy the DappCampWarriors contract",
    )
    parser.add_argument(
        "--network",
        default=selected_network(),
        help="network to deploy to (default: $WARRIORS_NETWORK or hardhat)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(log_level())

    config = get_network_config(args.network)
    logger.info(f"Network: {config.name}")

    w3 = connect(config)
    account = resolve_account(w3, deployer_private_key())

    result = deploy_dapp_camp_warriors(w3, account, network=config.name)
    print(result.format_success(), flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
