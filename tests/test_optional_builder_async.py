import asyncio
import gc
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from unittest import TestCase

from returns.maybe import Nothing, Some

from nrel.optionalbuilder import CombinationFailure, OptionalBuilder


def _completed(value) -> Future:
    future = Future()
    future.set_result(value)
    return future


def _failed(error: Exception) -> Future:
    future = Future()
    future.set_exception(error)
    return future


class TestOptionalBuilderOfAsync(TestCase):
    def test_of_async_two_present(self):
        builder = OptionalBuilder.of_async(_completed(Some(5)), _completed(Some("x")))

        self.assertEqual(builder.merge(lambda a, b: f"{a}{b}"), Some("5x"))

    def test_of_async_matches_of(self):
        builder = OptionalBuilder.of_async(_completed(Some(10)), _completed(Some(20)))

        self.assertEqual(builder, OptionalBuilder.of(Some(10), Some(20)))

    def test_of_async_with_absence(self):
        builder = OptionalBuilder.of_async(_completed(Nothing), _completed(Some(20)))

        self.assertEqual(builder.merge(lambda a, b: a + b), Nothing)

    def test_of_async_failure(self):
        error = RuntimeError("Future failed")

        with self.assertRaises(CombinationFailure) as raised:
            OptionalBuilder.of_async(_completed(Some(10)), _failed(error))

        self.assertIs(raised.exception.cause, error, "should wrap the original failure")
        self.assertIs(raised.exception.__cause__, error)
        self.assertIn("Failed to resolve one or both futures", str(raised.exception))

    def test_of_async_cancelled(self):
        cancelled = Future()
        cancelled.cancel()

        with self.assertRaises(CombinationFailure) as raised:
            OptionalBuilder.of_async(cancelled, _completed(Some(10)))

        self.assertIsInstance(raised.exception.cause, CancelledError)

    def test_of_async_cancelled_with_unresolved_partner(self):
        cancelled = Future()
        cancelled.cancel()

        with self.assertRaises(CombinationFailure):
            OptionalBuilder.of_async(Future(), cancelled)

    def test_of_async_cancelled_while_waiting(self):
        pending = Future()
        timer = threading.Timer(0.05, pending.cancel)
        timer.start()

        with self.assertRaises(CombinationFailure):
            OptionalBuilder.of_async(pending, _completed(Some(10)))
        timer.join()

    def test_of_async_fails_fast(self):
        never_resolves = Future()

        with self.assertLogs("nrel.optionalbuilder.util.future_ops", level="WARNING") as logs:
            with self.assertRaises(CombinationFailure):
                OptionalBuilder.of_async(never_resolves, _failed(ValueError("fast")))

        self.assertIn("second pending computation failed", logs.output[0])

    def test_of_async_with_executor(self):
        with ThreadPoolExecutor(max_workers=2) as executor:
            first = executor.submit(lambda: Some(3))
            second = executor.submit(lambda: Some(4))
            builder = OptionalBuilder.of_async(first, second)

        self.assertEqual(builder.merge(lambda a, b: a * b), Some(12))


class TestOptionalBuilderOfAwaitables(TestCase):
    def test_of_awaitables_two_present(self):
        async def value(v):
            await asyncio.sleep(0)
            return v

        async def run():
            builder = await OptionalBuilder.of_awaitables(value(Some(5)), value(Some("x")))
            return builder.merge(lambda a, b: f"{a}{b}")

        self.assertEqual(asyncio.run(run()), Some("5x"))

    def test_of_awaitables_with_absence(self):
        async def value(v):
            return v

        async def run():
            builder = await OptionalBuilder.of_awaitables(value(Nothing), value(Some(20)))
            return builder.merge(lambda a, b: a + b)

        self.assertEqual(asyncio.run(run()), Nothing)

    def test_of_awaitables_failure(self):
        error = RuntimeError("task failed")

        async def ok():
            return Some(10)

        async def fails():
            raise error

        async def run():
            await OptionalBuilder.of_awaitables(ok(), fails())

        with self.assertRaises(CombinationFailure) as raised:
            asyncio.run(run())

        self.assertIs(raised.exception.cause, error)

    def test_of_awaitables_cancelled(self):
        async def run():
            loop = asyncio.get_running_loop()
            cancelled = loop.create_future()
            cancelled.cancel()
            resolved = loop.create_future()
            resolved.set_result(Some(1))
            await OptionalBuilder.of_awaitables(cancelled, resolved)

        with self.assertRaises(CombinationFailure) as raised:
            asyncio.run(run())

        self.assertIsInstance(raised.exception.cause, asyncio.CancelledError)

    def test_of_awaitables_fails_fast(self):
        async def run():
            loop = asyncio.get_running_loop()
            never_resolves = loop.create_future()

            async def fails():
                raise ValueError("fast")

            await OptionalBuilder.of_awaitables(never_resolves, fails())

        with self.assertRaises(CombinationFailure):
            asyncio.run(run())

    def test_of_awaitables_cancelled_with_unresolved_partner(self):
        async def run():
            loop = asyncio.get_running_loop()
            cancelled = loop.create_future()
            cancelled.cancel()
            await OptionalBuilder.of_awaitables(loop.create_future(), cancelled)

        with self.assertRaises(CombinationFailure):
            asyncio.run(run())

    def test_of_awaitables_retrieves_late_failure(self):
        unhandled = []

        async def fails_now():
            raise ValueError("first")

        async def fails_later():
            await asyncio.sleep(0.01)
            raise ValueError("second")

        async def run():
            loop = asyncio.get_running_loop()
            loop.set_exception_handler(lambda _, context: unhandled.append(context))
            with self.assertRaises(CombinationFailure):
                await OptionalBuilder.of_awaitables(fails_now(), fails_later())
            await asyncio.sleep(0.05)
            gc.collect()

        asyncio.run(run())

        self.assertEqual(unhandled, [], "the late failure should have been retrieved")
