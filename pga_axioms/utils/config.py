"""
Configuration management for pga-axioms.

Provides the solver configuration: the shared tolerance, the root-selection
rules for the axioms with more than one solution, and the coefficient dtype.
"""

import json
from dataclasses import dataclass, field, asdict
from typing import Dict, Any
from pathlib import Path

import torch

from ..core.constants import DEFAULT_EPS, AXIOM5_ROOT_FORWARD, AXIOM5_ROOTS


_DTYPES = {
    'float64': torch.float64,
    'float32': torch.float32,
}


@dataclass
class SolverConfig:
    """
    Configuration for the axiom solvers and the folding boundary.

    Attributes:
        # Numerics
        eps: Tolerance for every comparison against zero
        dtype: Coefficient dtype for multivectors built from coordinates

        # Root selection
        axiom5_root: Which circle/line intersection axiom 5 folds onto
            ('forward' along the line's direction, or 'backward')
        axiom6_root: Index into the ordered axiom 6 candidates
    """

    # Numerics
    eps: float = DEFAULT_EPS
    dtype: str = 'float64'

    # Root selection
    axiom5_root: str = AXIOM5_ROOT_FORWARD
    axiom6_root: int = 0

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.eps > 0:
            raise ValueError(f"eps must be positive, got {self.eps}")
        if self.dtype not in _DTYPES:
            raise ValueError(f"dtype must be one of {sorted(_DTYPES)}, got '{self.dtype}'")
        if self.axiom5_root not in AXIOM5_ROOTS:
            raise ValueError(
                f"axiom5_root must be one of {AXIOM5_ROOTS}, got '{self.axiom5_root}'"
            )
        if isinstance(self.axiom6_root, bool) or not isinstance(self.axiom6_root, int) \
                or self.axiom6_root < 0:
            raise ValueError(f"axiom6_root must be a non-negative int, got {self.axiom6_root!r}")

    @property
    def torch_dtype(self) -> torch.dtype:
        """The torch dtype named by `dtype`."""
        return _DTYPES[self.dtype]

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SolverConfig':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        config = cls(**known_kwargs)
        config.extra.update(extra_kwargs)
        return config

    def update(self, **kwargs) -> 'SolverConfig':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return SolverConfig.from_dict(config_dict)


def load_config(filepath: str) -> SolverConfig:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        SolverConfig object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    return SolverConfig.from_dict(config_dict)


def save_config(config: SolverConfig, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: SolverConfig object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
