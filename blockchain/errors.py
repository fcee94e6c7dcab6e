"""
Deployment Errors
Error taxonomy for the contract deployment pipeline
"""


class DeployerError(Exception):
    """Base class for every deployment pipeline failure"""


class ArtifactResolutionError(DeployerError):
    """Named contract artifact is missing, ambiguous or not deployable"""


class DeploymentError(DeployerError):
    """Deployment transaction could not be built, signed or submitted"""


class ConfirmationError(DeployerError):
    """Deployment transaction timed out, reverted or left no code behind"""
