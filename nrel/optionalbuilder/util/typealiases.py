from concurrent.futures import Future
from typing import Awaitable, Callable, Optional, TypeVar

from returns.maybe import Maybe

E = TypeVar("E")
F = TypeVar("F")
T = TypeVar("T")

# PENDING COMPUTATIONS
PendingMaybe = Future[Maybe[T]]
AwaitableMaybe = Awaitable[Maybe[T]]

# COMBINERS
Combiner = Callable[[E, F], Optional[T]]
ComplexCombiner = Callable[[E, F], Maybe[T]]
