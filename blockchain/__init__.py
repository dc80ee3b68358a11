"""
Blockchain Interaction Package
Handles artifact loading, deployment transactions and the network client
"""

from .artifacts import ContractArtifact, find_artifact_path, load_artifact
from .contract_factory import ContractFactory, DeploymentHandle
from .client import BlockchainClient

__all__ = [
    'ContractArtifact',
    'find_artifact_path',
    'load_artifact',
    'ContractFactory',
    'DeploymentHandle',
    'BlockchainClient'
]
