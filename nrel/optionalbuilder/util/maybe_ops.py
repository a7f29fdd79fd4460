from typing import Any, Optional, TypeVar

from returns.maybe import Maybe, Some


class MaybeOps:
    T = TypeVar("T")

    @classmethod
    def is_present(cls, m: Maybe[T]) -> bool:
        return isinstance(m, Some)

    @classmethod
    def both_present(cls, first: Maybe[Any], second: Maybe[Any]) -> bool:
        return MaybeOps.is_present(first) and MaybeOps.is_present(second)

    @classmethod
    def coalesce(cls, value: Optional[T]) -> Maybe[T]:
        """
        treats None as absence; any other value, falsy ones included, is present

        :param value: a value that may be None
        :return: Some(value), or Nothing when value is None
        """
        return Maybe.from_optional(value)

    @classmethod
    def describe(cls, m: Maybe[Any]) -> str:
        return "present" if MaybeOps.is_present(m) else "absent"
