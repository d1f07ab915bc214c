"""
DappCampWarriors contract wrapper for deployment.

DappCampWarriors is an NFT collection deployed without constructor
arguments, typically to an L2 test network (e.g. optimistic-kovan).
"""

from typing import Optional, Union

from eth_account.signers.local import LocalAccount
from web3 import Web3

from .factory import ContractFactory

OPENSEA_TESTNET_ASSETS_URL = "https://testnets.opensea.io/assets"


class DappCampWarriorsContract(ContractFactory):
    """Factory for the DappCampWarriors NFT contract."""

    CONTRACT_NAME = "DappCampWarriors"

    def __init__(
        self,
        w3: Web3,
        account: Optional[Union[LocalAccount, str]] = None
    ):
        super().__init__(self.CONTRACT_NAME, w3, account)

    @staticmethod
    def opensea_asset_url(address: str, token_id: int = 0) -> str:
        """
        Build the testnet marketplace URL for one token.

        Args:
            address: Deployed contract address
            token_id: Token to view; the first NFT is token 0

        Returns:
            OpenSea testnet asset URL
        """
        return f"{OPENSEA_TESTNET_ASSETS_URL}/{address}/{token_id}"
