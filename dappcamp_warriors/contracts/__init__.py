"""Contract factories for deployment."""
from .factory import ContractFactory, DeployedContract, get_contract_factory
from .warriors import DappCampWarriorsContract

__all__ = [
    "ContractFactory",
    "DeployedContract",
    "get_contract_factory",
    "DappCampWarriorsContract",
]
