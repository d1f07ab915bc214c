"""
Shared fixtures

Deployments run against an in-process chain (web3's EthereumTesterProvider)
using a hand-assembled contract whose runtime code is a single STOP.
"""

import json
import sys

import pytest
from loguru import logger
from web3 import Web3, EthereumTesterProvider


# PUSH1 1, PUSH1 12, PUSH1 0, CODECOPY, PUSH1 1, PUSH1 0, RETURN | STOP
CREATION_BYTECODE = "0x6001600c60003960016000f300"
RUNTIME_BYTECODE = "0x00"


def write_artifact(artifacts_dir, source, name, bytecode, deployed_bytecode="0x"):
    """Write a Hardhat-style artifact file"""
    artifact_dir = artifacts_dir / f"{source}.sol"
    artifact_dir.mkdir(parents=True, exist_ok=True)

    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": name,
        "sourceName": f"contracts/{source}.sol",
        "abi": [],
        "bytecode": bytecode,
        "deployedBytecode": deployed_bytecode,
        "linkReferences": {},
        "deployedLinkReferences": {},
    }
    path = artifact_dir / f"{name}.json"
    path.write_text(json.dumps(artifact))

    # Hardhat writes a debug file next to each artifact
    (artifact_dir / f"{name}.dbg.json").write_text(
        json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../build-info/x.json"})
    )
    return path


@pytest.fixture
def artifacts_dir(tmp_path, monkeypatch):
    """Artifacts directory holding DappCampWarriors and an interface"""
    directory = tmp_path / "artifacts" / "contracts"
    write_artifact(
        directory, "DappCampWarriors", "DappCampWarriors",
        CREATION_BYTECODE, RUNTIME_BYTECODE,
    )
    write_artifact(directory, "interfaces/IWarrior", "IWarrior", "0x")
    monkeypatch.setenv("WARRIORS_ARTIFACTS_DIR", str(directory))
    return directory


@pytest.fixture
def empty_artifacts_dir(tmp_path, monkeypatch):
    """Artifacts directory before anything has been compiled"""
    directory = tmp_path / "empty"
    directory.mkdir()
    monkeypatch.setenv("WARRIORS_ARTIFACTS_DIR", str(directory))
    return directory


@pytest.fixture
def w3():
    """In-process test chain"""
    return Web3(EthereumTesterProvider())


@pytest.fixture
def owner(w3):
    """Node-managed deploying account"""
    return w3.eth.accounts[0]


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo sinks the CLI binds to a captured stream"""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message))
