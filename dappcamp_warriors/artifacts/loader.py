"""
Artifact loader for compiled smart contracts.

This module resolves contract names to the Hardhat-compiled artifact JSON
files and exposes the ABI, bytecode, and other metadata they contain.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

from loguru import logger

from ..exceptions import ArtifactNotFoundError

# Hardhat writes artifacts here, relative to the project being deployed
DEFAULT_ARTIFACTS_DIR = Path("artifacts") / "contracts"

# Contract name mappings
CONTRACT_PATHS = {
    "DappCampWarriors": "DappCampWarriors.sol/DappCampWarriors.json",
}


def get_artifacts_dir() -> Path:
    """
    Get the directory that compiled artifacts are read from.

    Returns:
        WARRIORS_ARTIFACTS_DIR when set, otherwise Hardhat's default
        ``artifacts/contracts`` under the working directory
    """
    override = os.getenv("WARRIORS_ARTIFACTS_DIR")
    if override:
        return Path(override)
    return DEFAULT_ARTIFACTS_DIR


def find_artifact_path(contract_name: str) -> Path:
    """
    Locate the artifact file for a contract.

    Known contracts are looked up in CONTRACT_PATHS; any other name is
    searched for under the artifacts directory. Hardhat's ``.dbg.json``
    debug files are never matched.

    Args:
        contract_name: Name of the contract (e.g., 'DappCampWarriors')

    Returns:
        Path to the artifact JSON file

    Raises:
        ArtifactNotFoundError: If no artifact file exists for the contract
    """
    artifacts_dir = get_artifacts_dir()

    if contract_name in CONTRACT_PATHS:
        artifact_path = artifacts_dir / CONTRACT_PATHS[contract_name]
        if artifact_path.exists():
            return artifact_path
    elif artifacts_dir.is_dir():
        matches = sorted(
            path for path in artifacts_dir.rglob(f"{contract_name}.json")
            if not path.name.endswith(".dbg.json")
        )
        if matches:
            if len(matches) > 1:
                logger.warning(
                    f"Multiple artifacts named {contract_name}, using {matches[0]}"
                )
            return matches[0]

    raise ArtifactNotFoundError(
        f"Artifact for {contract_name} not found in {artifacts_dir}\n"
        f"Make sure the contracts have been compiled with 'npx hardhat compile'"
    )


def load_artifact(contract_name: str) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        contract_name: Name of the contract (e.g., 'DappCampWarriors')

    Returns:
        Complete artifact dictionary including ABI, bytecode, and metadata

    Raises:
        ArtifactNotFoundError: If the artifact is missing or not valid JSON
    """
    artifact_path = find_artifact_path(contract_name)
    logger.debug(f"Loading artifact {artifact_path}")

    try:
        with open(artifact_path, 'r') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ArtifactNotFoundError(
            f"Artifact file for {contract_name} is unreadable: {e}"
        ) from e


def get_abi(contract_name: str) -> list:
    """
    Get the ABI for a specific contract.

    Args:
        contract_name: Name of the contract

    Returns:
        Contract ABI as a list
    """
    artifact = load_artifact(contract_name)
    return artifact.get('abi', [])


def get_bytecode(contract_name: str) -> str:
    """
    Get the deployment bytecode for a specific contract.

    Args:
        contract_name: Name of the contract

    Returns:
        Bytecode as a hex string (with '0x' prefix)
    """
    artifact = load_artifact(contract_name)
    return artifact.get('bytecode', '0x')


def get_deployed_bytecode(contract_name: str) -> str:
    """Get the runtime bytecode for a specific contract."""
    artifact = load_artifact(contract_name)
    return artifact.get('deployedBytecode', '0x')


def get_contract_metadata(contract_name: str) -> Dict[str, Any]:
    """
    Get metadata about the contract compilation.

    Args:
        contract_name: Name of the contract

    Returns:
        Dictionary with the contract and source names and Hardhat's
        artifact format tag
    """
    artifact = load_artifact(contract_name)

    return {
        'contractName': artifact.get('contractName'),
        'sourceName': artifact.get('sourceName'),
        'format': artifact.get('_format'),
        'linkReferences': artifact.get('linkReferences', {}),
    }


def has_bytecode(artifact: Dict[str, Any]) -> bool:
    """True when the artifact carries creation bytecode (not an interface)."""
    bytecode: Optional[str] = artifact.get('bytecode')
    return bool(bytecode) and bytecode not in ('0x', '0x0')


def list_available_contracts() -> list:
    """
    List all known contracts.

    Returns:
        List of contract names
    """
    return list(CONTRACT_PATHS.keys())


def validate_artifacts() -> Dict[str, bool]:
    """
    Validate that all known artifacts are present and deployable.

    Returns:
        Dictionary mapping contract names to availability status
    """
    status = {}
    for contract_name in CONTRACT_PATHS:
        try:
            status[contract_name] = has_bytecode(load_artifact(contract_name))
        except ArtifactNotFoundError:
            status[contract_name] = False

    return status
