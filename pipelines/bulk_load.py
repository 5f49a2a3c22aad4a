"""
Bulk Load

Replaces one box score table with the contents of a CSV export. This is
the only write path: a load deletes every row of the target table and
inserts the new rows in batches, all inside one transaction, so readers
see either the old table or the new one.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd
from peewee import Database, chunked

from core.logging import get_logger
from core.settings import settings
from db.base import bind_database
from pipelines.config import ImportConfig
from pipelines.transformers import RowRejected

log = get_logger("bulk_load")


@dataclass(frozen=True)
class LoadResult:
    kind: str
    target_table: str
    rows_read: int
    rows_loaded: int
    rows_rejected: int
    duration_seconds: float


def read_export(path: str | Path) -> pd.DataFrame:
    """Read a CSV export with every value kept as a string."""
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def prepare_rows(config: ImportConfig, frame: pd.DataFrame) -> tuple[list[dict], int]:
    """
    Transform raw rows, dropping the ones the transform rejects.

    Returns:
        (rows to insert, number of rejected rows)
    """
    rows: list[dict] = []
    seen: set = set()
    rejected = 0

    for index, raw in enumerate(frame.to_dict(orient="records")):
        try:
            row = config.transform(raw)
        except RowRejected as e:
            rejected += 1
            log.debug("row_rejected", kind=config.name, line=index + 2, reason=str(e))
            continue

        if config.unique_key:
            key = row[config.unique_key]
            if key in seen:
                rejected += 1
                log.debug("row_rejected", kind=config.name, line=index + 2, reason=f"duplicate {key!r}")
                continue
            seen.add(key)

        if config.ordered:
            row["position"] = len(rows)
        rows.append(row)

    return rows, rejected


def load_frame(
    database: Database,
    config: ImportConfig,
    frame: pd.DataFrame,
    batch_size: Optional[int] = None,
) -> LoadResult:
    """Replace ``config.model``'s table with the rows of ``frame``."""
    batch_size = batch_size or settings.import_batch_size
    started = time.perf_counter()
    log.info("import_started", kind=config.name, table=config.target_table, rows_read=len(frame))

    rows, rejected = prepare_rows(config, frame)

    bind_database(database)
    with database.atomic():
        config.model.delete().execute()
        for batch in chunked(rows, batch_size):
            config.model.insert_many(batch).execute()

    result = LoadResult(
        kind=config.name,
        target_table=config.target_table,
        rows_read=len(frame),
        rows_loaded=len(rows),
        rows_rejected=rejected,
        duration_seconds=round(time.perf_counter() - started, 3),
    )
    log.info(
        "import_completed",
        kind=result.kind,
        table=result.target_table,
        rows_loaded=result.rows_loaded,
        rows_rejected=result.rows_rejected,
        duration_seconds=result.duration_seconds,
    )
    return result


def load_file(
    database: Database,
    config: ImportConfig,
    path: Optional[str | Path] = None,
    batch_size: Optional[int] = None,
) -> LoadResult:
    """Read ``path`` (or the import's default export) and load it."""
    return load_frame(database, config, read_export(path or config.default_path), batch_size)
