"""
Import Registry and Exports

The three bulk imports, keyed by the name used on the command line.
"""

from db.models import PlayerGame, TeamGame, TeamName
from pipelines.bulk_load import LoadResult, load_file, load_frame
from pipelines.config import ImportConfig
from pipelines.transformers import (
    transform_player_row,
    transform_team_name_row,
    transform_team_row,
)


# In the order a fresh store is usually loaded
IMPORT_REGISTRY: dict[str, ImportConfig] = {
    "team_names": ImportConfig(
        name="team_names",
        display_name="Team Directory",
        model=TeamName,
        transform=transform_team_name_row,
        default_path="./nba_dataset/team_names.csv",
        unique_key="abbreviation",
        ordered=True,
    ),
    "players": ImportConfig(
        name="players",
        display_name="Player Box Scores",
        model=PlayerGame,
        transform=transform_player_row,
        default_path="./nba_dataset/traditional.csv",
    ),
    "teams": ImportConfig(
        name="teams",
        display_name="Team Box Scores",
        model=TeamGame,
        transform=transform_team_row,
        default_path="./nba_dataset/team_traditional.csv",
    ),
}


def get_import(name: str) -> ImportConfig:
    """
    Get an import configuration by name.

    Raises:
        ValueError: If the import name is not found
    """
    if name not in IMPORT_REGISTRY:
        available = ", ".join(IMPORT_REGISTRY.keys())
        raise ValueError(f"Unknown import '{name}'. Available: {available}")
    return IMPORT_REGISTRY[name]


__all__ = [
    "IMPORT_REGISTRY",
    "ImportConfig",
    "LoadResult",
    "get_import",
    "load_file",
    "load_frame",
]
