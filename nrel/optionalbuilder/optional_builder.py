from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from returns.maybe import Maybe, Nothing

from nrel.optionalbuilder.util import future_ops
from nrel.optionalbuilder.util.maybe_ops import MaybeOps
from nrel.optionalbuilder.util.typealiases import (
    AwaitableMaybe,
    Combiner,
    ComplexCombiner,
    PendingMaybe,
)

log = logging.getLogger(__name__)

E = TypeVar("E")
F = TypeVar("F")
T = TypeVar("T")


@dataclass(frozen=True)
class MergeResult(Generic[E, F]):
    """
    the two values of an OptionalBuilder once both are known to be present.
    only built by OptionalBuilder.merge from unwrapped slots, so a field holding
    Nothing is a present value that happens to be a Maybe.


    :param first: the value of the first slot
    :type first: E

    :param second: the value of the second slot
    :type second: F
    """

    first: E
    second: F


@dataclass(frozen=True)
class OptionalBuilder(Generic[E, F]):
    """
    combines two optional values into a single derived optional value.

    a combiner is applied only when both values are present; otherwise
    absence propagates. builders are immutable and carry no other state.


    :param first: the first optional value
    :type first: Maybe[E]

    :param second: the second optional value
    :type second: Maybe[F]
    """

    first: Maybe[E]
    second: Maybe[F]

    @classmethod
    def of(cls, first: Maybe[E], second: Maybe[F]) -> OptionalBuilder[E, F]:
        """
        builds an OptionalBuilder from two optional values

        :param first: the first optional value
        :param second: the second optional value
        :return: a builder holding both values
        """
        return OptionalBuilder(first=first, second=second)

    @classmethod
    def of_optional(cls, first: Optional[E], second: Optional[F]) -> OptionalBuilder[E, F]:
        """
        builds an OptionalBuilder from two plain values where None signals absence

        :param first: the first value, or None
        :param second: the second value, or None
        :return: a builder holding both values
        """
        return OptionalBuilder.of(MaybeOps.coalesce(first), MaybeOps.coalesce(second))

    @classmethod
    def of_async(
        cls, first: PendingMaybe[E], second: PendingMaybe[F]
    ) -> OptionalBuilder[E, F]:
        """
        builds an OptionalBuilder from two futures, blocking the calling thread
        until both resolve. there is no timeout: a future that never resolves
        blocks the caller indefinitely.

        :param first: a future resolving to the first optional value
        :param second: a future resolving to the second optional value
        :return: a builder holding the resolved values
        :raises: CombinationFailure if either future fails or is cancelled
        """
        first_result, second_result = future_ops.join(first, second)
        return OptionalBuilder.of(first_result, second_result)

    @classmethod
    async def of_awaitables(
        cls, first: AwaitableMaybe[E], second: AwaitableMaybe[F]
    ) -> OptionalBuilder[E, F]:
        """
        same as of_async, but suspends the calling task rather than a thread

        :param first: an awaitable resolving to the first optional value
        :param second: an awaitable resolving to the second optional value
        :return: a builder holding the resolved values
        :raises: CombinationFailure if either awaitable fails or is cancelled
        """
        first_result, second_result = await future_ops.join_awaitables(first, second)
        return OptionalBuilder.of(first_result, second_result)

    def is_complete(self) -> bool:
        return MaybeOps.both_present(self.first, self.second)

    def complex_merge(self, combiner: ComplexCombiner[E, F, T]) -> Maybe[T]:
        """
        combines the two values with a combiner that may itself decline to
        produce a result. the combiner is invoked only if both values are present.

        :param combiner: combines two present values into an optional result
        :return: the combiner's result verbatim, or Nothing if either value is absent
        """
        if not self.is_complete():
            log.debug(
                f"skipping merge, first is {MaybeOps.describe(self.first)} "
                f"and second is {MaybeOps.describe(self.second)}"
            )
            return Nothing

        return combiner(self.first.unwrap(), self.second.unwrap())

    def merge(self, combiner: Optional[Combiner[E, F, T]] = None) -> Maybe[T]:
        """
        combines the two values with a plain combiner, treating a None result
        as absence. without a combiner, the values are paired in a MergeResult.

        :param combiner: combines two present values into a result (Default: MergeResult)
        :return: the combined value, or Nothing if either value is absent
        """
        if combiner is None:
            return self.merge(MergeResult)

        return self.complex_merge(lambda a, b: MaybeOps.coalesce(combiner(a, b)))
