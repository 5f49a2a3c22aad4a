"""
Import Configuration

Immutable description of one bulk import: which export it reads, which
table it replaces and how a raw row becomes a table row.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Type

from db.base import BaseModel


@dataclass(frozen=True)
class ImportConfig:
    """
    Attributes:
        name: Import kind used on the command line (e.g., "players")
        display_name: Human-readable name
        model: Table the import replaces
        transform: Raw CSV row -> column dict; raises RowRejected
        default_path: CSV read when no file is given
        unique_key: Column that must be unique; later duplicates are rejected
        ordered: If True, each row gets its file position in ``position``
    """

    name: str
    display_name: str
    model: Type[BaseModel]
    transform: Callable[[dict], dict]
    default_path: str
    unique_key: Optional[str] = None
    ordered: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if not self.name:
            raise ValueError("Import name is required")
        if self.unique_key and self.unique_key not in self.model._meta.fields:
            raise ValueError(
                f"{self.model.__name__} has no column {self.unique_key!r}"
            )

    @property
    def target_table(self) -> str:
        return self.model._meta.table_name
