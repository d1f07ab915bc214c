"""
Contract factory for deployment.

This module provides the Python counterpart of a framework's
``getContractFactory(name)``: a factory built from a compiled artifact whose
``deploy()`` sends the creation transaction and waits for it to be mined.
"""

from typing import Optional, Union, Any

from eth_account.signers.local import LocalAccount
from loguru import logger
from web3 import Web3
from web3.exceptions import ContractLogicError, Web3Exception

from ..artifacts.loader import load_artifact, has_bytecode
from ..config import receipt_timeout
from ..exceptions import ArtifactNotFoundError, DeploymentRevertedError, NetworkError
from ..network import resolve_account


class DeployedContract:
    """Handle to a contract instance that has been mined."""

    def __init__(self, w3: Web3, address: str, abi: list, transaction_hash: str):
        self.w3 = w3
        self.address = address
        self.abi = abi
        self.transaction_hash = transaction_hash

    @property
    def contract(self):
        """web3 contract object bound to the deployed address."""
        return self.w3.eth.contract(address=self.address, abi=self.abi)

    def __repr__(self):
        return f"<DeployedContract {self.address}>"


class ContractFactory:
    """
    Deployable handle for a compiled contract.

    The factory holds the ABI and creation bytecode of one artifact and
    deploys new instances of it from a single account.
    """

    def __init__(
        self,
        contract_name: str,
        w3: Web3,
        account: Optional[Union[LocalAccount, str]] = None
    ):
        """
        Initialize contract factory.

        Args:
            contract_name: Name of the compiled contract
            w3: Connected Web3 instance
            account: Local signing account or node-managed address; the
                node's first account is used when omitted

        Raises:
            ArtifactNotFoundError: If the artifact is missing or has no
                creation bytecode
        """
        artifact = load_artifact(contract_name)
        if not has_bytecode(artifact):
            raise ArtifactNotFoundError(
                f"Artifact for {contract_name} has no bytecode to deploy "
                f"(interface or abstract contract?)"
            )

        self.contract_name = contract_name
        self.abi = artifact.get('abi', [])
        self.bytecode = artifact['bytecode']
        self.w3 = w3
        self.account = account if account is not None else resolve_account(w3)

    @property
    def deployer_address(self) -> str:
        if isinstance(self.account, LocalAccount):
            return self.account.address
        return self.account

    def deploy(self, timeout: Optional[float] = None) -> DeployedContract:
        """
        Deploy a new instance with no constructor arguments.

        Blocks until the creation transaction is mined.

        Args:
            timeout: Seconds to wait for the receipt; defaults to
                WARRIORS_RECEIPT_TIMEOUT

        Returns:
            Handle to the deployed contract

        Raises:
            NetworkError: If the node is unreachable, rejects the
                transaction, or no receipt arrives in time
            DeploymentRevertedError: If the transaction reverts
        """
        if timeout is None:
            timeout = receipt_timeout()

        logger.info(f"Deploying {self.contract_name}...")
        tx_hash = self._send_creation_transaction()
        tx_hash_hex = Web3.to_hex(tx_hash)

        logger.info(f"Transaction sent: {tx_hash_hex}")
        logger.info("Waiting for confirmation...")

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
        except (OSError, Web3Exception) as e:
            raise NetworkError(
                f"No receipt for {self.contract_name} deployment {tx_hash_hex}: {e}"
            ) from e

        if receipt['status'] != 1:
            raise DeploymentRevertedError(
                f"Deployment of {self.contract_name} reverted in {tx_hash_hex}",
                transaction_hash=tx_hash_hex,
            )

        logger.info(f"Gas used: {receipt['gasUsed']}")
        return DeployedContract(
            self.w3,
            receipt['contractAddress'],
            self.abi,
            tx_hash_hex,
        )

    def _send_creation_transaction(self) -> Any:
        constructor = self.w3.eth.contract(
            abi=self.abi,
            bytecode=self.bytecode
        ).constructor()

        try:
            if isinstance(self.account, LocalAccount):
                transaction = constructor.build_transaction({
                    'from': self.account.address,
                    'nonce': self.w3.eth.get_transaction_count(self.account.address),
                })
                signed_tx = self.account.sign_transaction(transaction)
                return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

            return constructor.transact({'from': self.account})

        except ContractLogicError as e:
            raise DeploymentRevertedError(
                f"Deployment of {self.contract_name} reverted: {e}"
            ) from e
        except (OSError, Web3Exception) as e:
            raise NetworkError(
                f"Network rejected {self.contract_name} deployment: {e}"
            ) from e


def get_contract_factory(
    contract_name: str,
    w3: Web3,
    account: Optional[Union[LocalAccount, str]] = None
) -> ContractFactory:
    """Resolve a contract artifact by name into a deployable factory."""
    return ContractFactory(contract_name, w3, account)
