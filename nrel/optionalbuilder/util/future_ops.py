"""
joins over two pending computations, failing fast when either one fails.

neither join supports a timeout: a computation that never resolves leaves
the caller waiting indefinitely.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from concurrent import futures
from typing import Awaitable, Optional, Tuple, TypeVar, Union

from nrel.optionalbuilder.util.exception import CombinationFailure

log = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")

AnyFuture = Union[futures.Future, asyncio.Future]


def _failure_of(future: AnyFuture) -> Optional[BaseException]:
    """
    inspects a completed future for a failure

    :param future: a future in the done state
    :return: the cause of failure, or None if the future succeeded
    """
    if future.cancelled():
        if isinstance(future, asyncio.Future):
            return asyncio.CancelledError()
        else:
            return futures.CancelledError()
    else:
        return future.exception()


def _raise_on_failure(first: AnyFuture, second: AnyFuture):
    for name, future in (("first", first), ("second", second)):
        if not future.done():
            continue
        cause = _failure_of(future)
        if cause is not None:
            log.warning(f"{name} pending computation failed: {cause!r}")
            raise CombinationFailure(cause) from cause


def _retrieve_failure(future: asyncio.Future):
    # marks a leftover task's exception as retrieved so asyncio does not report it
    if not future.cancelled():
        future.exception()


def join(first: futures.Future[A], second: futures.Future[B]) -> Tuple[A, B]:
    """
    blocks the calling thread until both futures resolve, or, until one fails.

    done callbacks fire on cancel(), so a future cancelled by hand or by
    executor shutdown is seen without waiting for an executor to dequeue it.

    :param first: the first pending computation
    :param second: the second pending computation
    :return: the results of both computations
    :raises: CombinationFailure if either computation raised or was cancelled
    """
    changed = threading.Event()
    first.add_done_callback(lambda _: changed.set())
    second.add_done_callback(lambda _: changed.set())

    while True:
        _raise_on_failure(first, second)
        if first.done() and second.done():
            return first.result(), second.result()
        changed.wait()
        changed.clear()


async def join_awaitables(first: Awaitable[A], second: Awaitable[B]) -> Tuple[A, B]:
    """
    suspends the calling task until both awaitables resolve, or, until one fails.

    cancelling the calling task propagates as asyncio.CancelledError; only a
    cancelled pending computation is reported as a CombinationFailure. on
    failure the other computation keeps running, and any failure it raises
    later is retrieved and discarded.

    :param first: the first pending computation
    :param second: the second pending computation
    :return: the results of both computations
    :raises: CombinationFailure if either computation raised or was cancelled
    """
    first_future = asyncio.ensure_future(first)
    second_future = asyncio.ensure_future(second)
    pending = {first_future, second_future}
    while pending:
        # FIRST_EXCEPTION does not return early on a cancelled future
        _, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
        try:
            _raise_on_failure(first_future, second_future)
        except CombinationFailure:
            for future in pending:
                future.add_done_callback(_retrieve_failure)
            raise
    return first_future.result(), second_future.result()
