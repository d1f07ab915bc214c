"""
DappCamp Warriors deployment package

Resolves compiled Hardhat artifacts and deploys the DappCampWarriors NFT
contract to a configured network.
"""

__version__ = "1.0.0"
__author__ = "DappCamp"

from .artifacts.loader import (
    get_abi,
    get_bytecode,
    load_artifact,
    get_contract_metadata
)

from .contracts.factory import ContractFactory, DeployedContract, get_contract_factory
from .contracts.warriors import DappCampWarriorsContract
from .deployer import DeploymentResult, deploy_contract, deploy_dapp_camp_warriors
from .exceptions import (
    DeployerError,
    ArtifactNotFoundError,
    NetworkError,
    DeploymentRevertedError,
    ConfigurationError,
)

__all__ = [
    'get_abi',
    'get_bytecode',
    'load_artifact',
    'get_contract_metadata',
    'ContractFactory',
    'DeployedContract',
    'get_contract_factory',
    'DappCampWarriorsContract',
    'DeploymentResult',
    'deploy_contract',
    'deploy_dapp_camp_warriors',
    'DeployerError',
    'ArtifactNotFoundError',
    'NetworkError',
    'DeploymentRevertedError',
    'ConfigurationError',
]
