"""
Blockchain Interaction Package
Handles artifact resolution, contract deployment and signing
"""

from .artifacts import ArtifactStore, ContractArtifact
from .contract_factory import ContractFactory, DeployedContract
from .errors import (
    ArtifactResolutionError,
    ConfirmationError,
    DeployerError,
    DeploymentError,
)
from .signer import Signer
from .toolkit import DeploymentToolkit

__all__ = [
    'ArtifactStore',
    'ContractArtifact',
    'ContractFactory',
    'DeployedContract',
    'DeploymentToolkit',
    'Signer',
    'DeployerError',
    'ArtifactResolutionError',
    'DeploymentError',
    'ConfirmationError'
]
