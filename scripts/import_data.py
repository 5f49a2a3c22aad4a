"""
Bulk-load box score exports into the record store.

Each run replaces one table:

    python -m scripts.import_data team_names
    python -m scripts.import_data players --file ./nba_dataset/traditional.csv
    python -m scripts.import_data teams --database-url sqlite:///boxscores.db

Refreshing data means re-running the import; there is no incremental path.
"""

from typing import Optional

from core.logging import get_logger, setup_logging
from core.settings import settings
from db.base import close_db, init_db
from pipelines import IMPORT_REGISTRY, LoadResult, get_import, load_file


def import_data(
    kind: str,
    file: Optional[str] = None,
    database_url: Optional[str] = None,
    batch_size: Optional[int] = None,
) -> LoadResult:
    """
    Replace one table with the contents of a CSV export.

    Args:
        kind: One of IMPORT_REGISTRY's keys
        file: CSV to read (defaults to the import's usual export path)
        database_url: Target database (defaults to DATABASE_URL)
        batch_size: Rows per INSERT statement
    """
    config = get_import(kind)
    database = init_db(database_url or settings.database_url)
    try:
        return load_file(database, config, file, batch_size)
    finally:
        close_db()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Bulk-load a box score export (replaces the table)")
    parser.add_argument("kind", choices=sorted(IMPORT_REGISTRY), help="Which export to load")
    parser.add_argument("--file", help="CSV file to read (default: the import's usual path)")
    parser.add_argument("--database-url", help="Target database (default: DATABASE_URL)")
    parser.add_argument("--batch-size", type=int, help="Rows per INSERT (default: IMPORT_BATCH_SIZE)")

    args = parser.parse_args()

    setup_logging()
    result = import_data(args.kind, args.file, args.database_url, args.batch_size)
    get_logger("import_data").info(
        "import_summary",
        kind=result.kind,
        rows_read=result.rows_read,
        rows_loaded=result.rows_loaded,
        rows_rejected=result.rows_rejected,
    )
