"""
Deployment configuration.

Network endpoints and the deploying key come from the environment, with a
``.env`` file in the working directory loaded first.
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv, find_dotenv

from .exceptions import ConfigurationError

# Search from the working directory (the Hardhat project), not this package
load_dotenv(find_dotenv(usecwd=True))

DEFAULT_NETWORK = "hardhat"
DEFAULT_RECEIPT_TIMEOUT = 120

# name -> (default RPC URL, chain id)
NETWORKS = {
    "hardhat": ("http://127.0.0.1:8545", 31337),
    "localhost": ("http://127.0.0.1:8545", 31337),
    "optimistic-kovan": (None, 69),
}


@dataclass(frozen=True)
class NetworkConfig:
    """Connection details for one named network."""

    name: str
    rpc_url: Optional[str]
    chain_id: Optional[int] = None


def rpc_url_env_var(network_name: str) -> str:
    """Environment variable that overrides a network's RPC URL."""
    return network_name.upper().replace("-", "_") + "_RPC_URL"


def available_networks() -> Dict[str, NetworkConfig]:
    """Build the network table with environment overrides applied."""
    return {
        name: NetworkConfig(
            name=name,
            rpc_url=os.getenv(rpc_url_env_var(name), default_url),
            chain_id=chain_id,
        )
        for name, (default_url, chain_id) in NETWORKS.items()
    }


def selected_network() -> str:
    return os.getenv("WARRIORS_NETWORK", DEFAULT_NETWORK)


def deployer_private_key() -> Optional[str]:
    return os.getenv("DEPLOYER_PRIVATE_KEY") or None


def receipt_timeout() -> float:
    """
    Seconds to wait for a deployment receipt.

    Raises:
        ConfigurationError: If WARRIORS_RECEIPT_TIMEOUT is not a positive number
    """
    value = os.getenv("WARRIORS_RECEIPT_TIMEOUT", DEFAULT_RECEIPT_TIMEOUT)
    try:
        timeout = float(value)
    except ValueError:
        timeout = None

    if timeout is None or timeout <= 0:
        raise ConfigurationError(
            f"WARRIORS_RECEIPT_TIMEOUT must be a positive number of seconds, got {value!r}"
        )
    return timeout


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
