"""
Network Configuration Tests
"""

from unittest.mock import MagicMock

import pytest
from eth_account import Account
from loguru import logger
from web3 import Web3

from dappcamp_warriors import config
from dappcamp_warriors.config import NetworkConfig
from dappcamp_warriors.exceptions import ConfigurationError, NetworkError
from dappcamp_warriors import network as network_module
from dappcamp_warriors.network import get_network_config, connect, resolve_account


class TestNetworkConfig:
    """Named networks and environment overrides"""

    def test_hardhat_default(self, monkeypatch):
        monkeypatch.delenv("HARDHAT_RPC_URL", raising=False)
        network = get_network_config("hardhat")

        assert network.rpc_url == "http://127.0.0.1:8545"
        assert network.chain_id == 31337

    def test_rpc_url_override(self, monkeypatch):
        monkeypatch.setenv("OPTIMISTIC_KOVAN_RPC_URL", "https://kovan.optimism.io")
        network = get_network_config("optimistic-kovan")

        assert network.rpc_url == "https://kovan.optimism.io"
        assert network.chain_id == 69

    def test_unknown_network(self):
        with pytest.raises(NetworkError, match="Available networks"):
            get_network_config("mainnet-fork")

    def test_env_var_name(self):
        assert config.rpc_url_env_var("optimistic-kovan") == "OPTIMISTIC_KOVAN_RPC_URL"

    def test_selected_network(self, monkeypatch):
        monkeypatch.delenv("WARRIORS_NETWORK", raising=False)
        assert config.selected_network() == "hardhat"

        monkeypatch.setenv("WARRIORS_NETWORK", "optimistic-kovan")
        assert config.selected_network() == "optimistic-kovan"

    def test_receipt_timeout(self, monkeypatch):
        monkeypatch.setenv("WARRIORS_RECEIPT_TIMEOUT", "15")
        assert config.receipt_timeout() == 15.0

    def test_receipt_timeout_default(self, monkeypatch):
        monkeypatch.delenv("WARRIORS_RECEIPT_TIMEOUT", raising=False)
        assert config.receipt_timeout() == 120.0

    @pytest.mark.parametrize("value", ["2m", "0", "-5"])
    def test_receipt_timeout_invalid(self, monkeypatch, value):
        monkeypatch.setenv("WARRIORS_RECEIPT_TIMEOUT", value)

        with pytest.raises(ConfigurationError, match="WARRIORS_RECEIPT_TIMEOUT"):
            config.receipt_timeout()

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert config.log_level() == "WARNING"


class TestConnect:
    """Connecting to a configured network"""

    @pytest.fixture
    def fake_web3(self, monkeypatch):
        """Web3 class whose instances always respond"""
        fake = MagicMock()
        fake.return_value.is_connected.return_value = True
        monkeypatch.setattr(network_module, "Web3", fake)
        return fake

    def test_missing_rpc_url(self):
        with pytest.raises(NetworkError, match="OPTIMISTIC_KOVAN_RPC_URL"):
            connect(NetworkConfig("optimistic-kovan", None, 69))

    def test_unreachable(self):
        """Nothing listens on the discard port"""
        with pytest.raises(NetworkError, match="Failed to connect"):
            connect(NetworkConfig("localhost", "http://127.0.0.1:9", 31337))

    def test_chain_id_mismatch_is_logged(self, fake_web3):
        fake_web3.return_value.eth.chain_id = 1
        warnings = []
        handler_id = logger.add(warnings.append, level="WARNING")

        try:
            w3 = connect(NetworkConfig("optimistic-kovan", "http://node", 69))
        finally:
            logger.remove(handler_id)

        assert w3 is fake_web3.return_value
        assert len(warnings) == 1
        assert "expects chain id 69" in warnings[0]

    def test_chain_id_match(self, fake_web3):
        fake_web3.return_value.eth.chain_id = 69
        warnings = []
        handler_id = logger.add(warnings.append, level="WARNING")

        try:
            connect(NetworkConfig("optimistic-kovan", "http://node", 69))
        finally:
            logger.remove(handler_id)

        assert warnings == []


class TestResolveAccount:
    """Choosing the deploying account"""

    def test_node_account(self, w3):
        assert resolve_account(w3) == w3.eth.accounts[0]

    def test_private_key(self, w3):
        local = Account.create()

        account = resolve_account(w3, Web3.to_hex(local.key))

        assert account.address == local.address

    def test_node_without_accounts(self):
        w3 = MagicMock()
        w3.eth.accounts = []

        with pytest.raises(NetworkError, match="DEPLOYER_PRIVATE_KEY"):
            resolve_account(w3)
