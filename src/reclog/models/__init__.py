"""reclog data models - re-exports all public model classes."""

from reclog.models.config import ProjectConfig
from reclog.models.operation import SEPARATOR, Operation

__all__ = [
    "Operation",
    "ProjectConfig",
    "SEPARATOR",
]
