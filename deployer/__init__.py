"""
Deployer Package
Deploys the SSB contract and reports its address
"""

from .config import DeployConfig
from .constants import SSB_ARTIFACT_NAME, SSB_CONSTRUCTOR_ARGS
from .deployer import Deployer
from .exceptions import (
    ArtifactNotFoundError,
    ConfigurationError,
    DeploymentFailure,
    TransactionRevertedError,
)

__all__ = [
    'DeployConfig',
    'Deployer',
    'DeploymentFailure',
    'ArtifactNotFoundError',
    'ConfigurationError',
    'TransactionRevertedError',
    'SSB_ARTIFACT_NAME',
    'SSB_CONSTRUCTOR_ARGS'
]
