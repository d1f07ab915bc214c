"""
Network selection and connection.

Turns a network name into a connected Web3 instance and picks the account
that sends the deployment transaction.
"""

from typing import Optional, Union

from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger
from web3 import Web3
from web3.exceptions import Web3Exception

from .config import NetworkConfig, available_networks, rpc_url_env_var
from .exceptions import NetworkError

HTTP_REQUEST_TIMEOUT = 30


def get_network_config(network_name: str) -> NetworkConfig:
    """
    Look up a configured network by name.

    Raises:
        NetworkError: If the network is not configured
    """
    networks = available_networks()
    if network_name not in networks:
        available = ", ".join(networks.keys())
        raise NetworkError(
            f"Unknown network: {network_name}. Available networks: {available}"
        )
    return networks[network_name]


def connect(config: NetworkConfig) -> Web3:
    """
    Connect to a network over HTTP.

    Args:
        config: Network to connect to

    Returns:
        Connected Web3 instance

    Raises:
        NetworkError: If the network has no RPC URL or does not respond
    """
    if not config.rpc_url:
        raise NetworkError(
            f"No RPC URL configured for {config.name}; "
            f"set {rpc_url_env_var(config.name)}"
        )

    w3 = Web3(Web3.HTTPProvider(
        config.rpc_url,
        request_kwargs={'timeout': HTTP_REQUEST_TIMEOUT},
    ))

    if not w3.is_connected():
        raise NetworkError(f"Failed to connect to {config.name} at {config.rpc_url}")

    if config.chain_id is not None:
        try:
            chain_id = w3.eth.chain_id
        except (OSError, Web3Exception) as e:
            raise NetworkError(f"Could not read chain id from {config.name}: {e}") from e

        # Mismatch is reported, not enforced
        if chain_id != config.chain_id:
            logger.warning(
                f"{config.name} expects chain id {config.chain_id}, "
                f"node reports {chain_id}"
            )

    logger.info(f"Connected to {config.name}")
    return w3


def resolve_account(
    w3: Web3,
    private_key: Optional[str] = None
) -> Union[LocalAccount, str]:
    """
    Pick the account that deploys.

    Args:
        w3: Connected Web3 instance
        private_key: Key to sign with locally; when omitted the node's
            first unlocked account sends the transaction

    Returns:
        A local signing account, or the address of a node-managed account

    Raises:
        NetworkError: If no key is given and the node exposes no accounts
    """
    if private_key:
        account = Account.from_key(private_key)
        logger.info(f"Deploying from local account {account.address}")
        return account

    try:
        accounts = w3.eth.accounts
    except (OSError, Web3Exception) as e:
        raise NetworkError(f"Could not list node accounts: {e}") from e

    if not accounts:
        raise NetworkError(
            "Node exposes no accounts; set DEPLOYER_PRIVATE_KEY to sign locally"
        )

    logger.info(f"Deploying from node account {accounts[0]}")
    return accounts[0]
