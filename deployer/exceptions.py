"""
Deployment Exceptions
Every failure along the deployment sequence is a DeploymentFailure
"""


class DeploymentFailure(Exception):
    """Raised when a contract deployment cannot be completed."""

    pass


class ConfigurationError(DeploymentFailure, ValueError):
    """Raised when deployment settings are invalid."""

    pass


class ArtifactNotFoundError(DeploymentFailure, FileNotFoundError):
    """Raised when a compiled contract artifact cannot be resolved."""

    pass


class TransactionRevertedError(DeploymentFailure):
    """Raised when the deployment transaction is mined with status 0."""

    pass
