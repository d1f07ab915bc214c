"""Exceptions raised while resolving and deploying contracts."""


class DeployerError(Exception):
    """Base class for all deployment failures."""


class ArtifactNotFoundError(DeployerError):
    """The named contract artifact cannot be resolved to deployable bytecode."""


class NetworkError(DeployerError):
    """The configured network is unreachable or rejected the transaction."""


class DeploymentRevertedError(DeployerError):
    """The deployment transaction was mined but reverted."""

    def __init__(self, message: str, transaction_hash: str = None):
        super().__init__(message)
        self.transaction_hash = transaction_hash


class ConfigurationError(DeployerError):
    """An environment setting has a value that cannot be used."""
