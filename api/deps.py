"""
Route Dependencies

The record store lives on ``app.state`` and is injected into routes.
Queries are synchronous peewee work, so they run in a worker thread that
holds its own connection for the duration of the query.
"""

import asyncio
from typing import Any, Callable, TypeVar

from fastapi import Request

from services.record_store import RecordStore

T = TypeVar("T")


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


async def run_query(
    store: RecordStore, func: Callable[..., T], *args: Any, **kwargs: Any
) -> T:
    """Run ``func(store, *args, **kwargs)`` off the event loop."""

    def _run() -> T:
        with store.session():
            return func(store, *args, **kwargs)

    return await asyncio.to_thread(_run)
