"""
Data Transfer Objects (DTOs) for the application layer.

These objects carry operation outcomes from the service to the interface
layer, which decides how to present them.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class OperationResult:
    """
    Outcome of a location stack operation.

    ``ok`` is False for recoverable failures (collisions, missing entries,
    missing confirmation): nothing was changed and ``message`` says why.
    Fatal failures are raised as ``ApplicationError`` instead.
    """
    ok: bool
    message: str = ""
    entries: Dict[str, str] = field(default_factory=dict)
    paths: List[str] = field(default_factory=list)
    names: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def success(cls, message: str = "", **kwargs) -> "OperationResult":
        return cls(ok=True, message=message, **kwargs)

    @classmethod
    def failure(cls, message: str, **kwargs) -> "OperationResult":
        return cls(ok=False, message=message, **kwargs)


@dataclass
class NavigationResult(OperationResult):
    """Outcome of a goto: where we went and what was stored as ``last``."""
    target: Optional[str] = None
    previous: Optional[str] = None
