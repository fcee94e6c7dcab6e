"""
Utilities Package
Configuration and logging shared by the deployment scripts
"""

from .config import DeployConfig
from .logger import setup_logging

__all__ = [
    'DeployConfig',
    'setup_logging'
]
