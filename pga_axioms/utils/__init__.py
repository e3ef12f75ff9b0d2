"""
Utilities for pga-axioms.
"""

from .config import (
    SolverConfig,
    load_config,
    save_config,
)

__all__ = [
    "SolverConfig",
    "load_config",
    "save_config",
]
