"""
Deployer: resolve a contract artifact, deploy it, report the address.
"""

from dataclasses import dataclass
from typing import Optional, Union

from eth_account.signers.local import LocalAccount
from loguru import logger
from web3 import Web3

from .contracts.factory import get_contract_factory
from .contracts.warriors import DappCampWarriorsContract

SUCCESS_MESSAGE = "contract deployed on '{address}'"


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of one successful deployment."""

    address: str
    contract_name: str
    network: Optional[str] = None
    transaction_hash: Optional[str] = None

    def __post_init__(self):
        if not self.address:
            raise ValueError("Deployment result requires a contract address")

    def format_success(self) -> str:
        return SUCCESS_MESSAGE.format(address=self.address)


def deploy_contract(
    contract_name: str,
    w3: Web3,
    account: Optional[Union[LocalAccount, str]] = None,
    timeout: Optional[float] = None,
    network: Optional[str] = None
) -> DeploymentResult:
    """
    Deploy a named contract with no constructor arguments.

    Args:
        contract_name: Name of the compiled contract artifact
        w3: Connected Web3 instance
        account: Local signing account or node-managed address
        timeout: Seconds to wait for the receipt
        network: Network name, recorded on the result

    Returns:
        DeploymentResult with the new contract's address

    Raises:
        ArtifactNotFoundError: If the artifact cannot be resolved
        NetworkError: If the network is unreachable or rejects the transaction
        DeploymentRevertedError: If the deployment reverts
    """
    factory = get_contract_factory(contract_name, w3, account)
    deployed = factory.deploy(timeout=timeout)

    logger.success(f"{contract_name} deployed at {deployed.address}")
    return DeploymentResult(
        address=deployed.address,
        contract_name=contract_name,
        network=network,
        transaction_hash=deployed.transaction_hash,
    )


def deploy_dapp_camp_warriors(
    w3: Web3,
    account: Optional[Union[LocalAccount, str]] = None,
    network: Optional[str] = None
) -> DeploymentResult:
    """Deploy DappCampWarriors and log where its first NFT can be viewed."""
    result = deploy_contract(
        DappCampWarriorsContract.CONTRACT_NAME,
        w3,
        account,
        network=network,
    )
    logger.info(
        "View the first NFT at "
        f"{DappCampWarriorsContract.opensea_asset_url(result.address)}"
    )
    return result
