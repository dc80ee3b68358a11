"""
Shared test fixtures
"""

import json
import sys

import pytest
from loguru import logger


HARDHAT_ACCOUNT_0 = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'
HARDHAT_KEY_0 = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcbc750e8f3bcc5f2c'

SSB_ABI = [
    {
        "inputs": [
            {"internalType": "string", "name": "name", "type": "string"},
            {"internalType": "string", "name": "symbol", "type": "string"},
            {"internalType": "address payable", "name": "beneficiary", "type": "address"},
            {"internalType": "address payable", "name": "royaltyReceiver", "type": "address"}
        ],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "name",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function"
    }
]


def write_artifact(root, source_name, contract_name, abi=None, bytecode='0x6080604052'):
    """Write a hardhat-style artifact under root and return its path"""
    directory = root / source_name
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / f"{contract_name}.json"
    path.write_text(json.dumps({
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": source_name,
        "abi": SSB_ABI if abi is None else abi,
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
        "linkReferences": {},
        "deployedLinkReferences": {}
    }))

    (directory / f"{contract_name}.dbg.json").write_text(json.dumps({
        "_format": "hh-sol-dbg-1",
        "buildInfo": "../../build-info/abc.json"
    }))

    return path


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts directory containing a compiled SSB contract"""
    root = tmp_path / 'artifacts'
    write_artifact(root, 'contracts/SSB.sol', 'SSB')
    (root / 'build-info').mkdir()
    (root / 'build-info' / 'abc.json').write_text('{}')
    return root


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks bound to captured streams after each test"""
    yield
    logger.remove()
    logger.add(sys.stderr, level="INFO")
