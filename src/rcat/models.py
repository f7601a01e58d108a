# src/rcat/models.py
from dataclasses import dataclass

@dataclass(frozen=True)
class FileArgument:
    """Immutable data class holding one user-supplied path."""
    path: str
