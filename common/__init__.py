"""
AlgoLab Common
==============
Shared error taxonomy and demo configuration.

Usage:
    from common import InvalidParameterError, DemoConfig
"""

from common.errors import AlgorithmError, InvalidParameterError, NegativeCycleError
from common.config import DemoConfig

__all__ = [
    "AlgorithmError", "InvalidParameterError", "NegativeCycleError",
    "DemoConfig",
]
