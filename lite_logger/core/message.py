"""Literal and lazily produced log messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class LiteralMessage:
    """A message whose text is already known."""

    text: str

    def resolve(self) -> str:
        return self.text


@dataclass(frozen=True)
class LazyMessage:
    """A message produced on demand by a zero-argument callable.

    The producer is only called from ``resolve``; callers must resolve a
    message at most once per emitted record.
    """

    producer: Callable[[], object]

    def resolve(self) -> str:
        return str(self.producer())


Message = Union[LiteralMessage, LazyMessage]
MessageLike = Union[Message, str, Callable[[], object]]


def as_message(value: object) -> Message:
    """Wrap ``value`` in the matching message variant without evaluating it."""
    if isinstance(value, (LiteralMessage, LazyMessage)):
        return value
    if isinstance(value, str):
        return LiteralMessage(value)
    if callable(value):
        return LazyMessage(value)
    return LiteralMessage(str(value))
