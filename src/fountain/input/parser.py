"""Pure text-to-command parsing.

Nothing here raises for malformed text: every function returns a
``ParseResult`` holding either a value or an error message.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from fountain.components.action import Action, Direction
from fountain.components.level_layout import LevelSize
from fountain.constants import INVALID_INPUT_MESSAGE

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, text: str | None) -> "ParseResult[T]":
        return cls(error=f"{INVALID_INPUT_MESSAGE} Unrecognised command: {text!r}")


ACTION_VOCABULARY: dict[str, Action] = {
    **{f"move {d.value}": Action.move(d) for d in Direction},
    **{f"shoot {d.value}": Action.shoot(d) for d in Direction},
    "enable fountain": Action.activate_objective(),
    "help": Action.help(),
}

LEVEL_VOCABULARY: dict[str, LevelSize] = {size.value: size for size in LevelSize}


def parse_action(text: str | None) -> ParseResult[Action]:
    # Vocabulary is case- and phrase-sensitive; only the line ending is dropped.
    if text is None:
        return ParseResult.failure(text)
    action = ACTION_VOCABULARY.get(text.rstrip("\r\n"))
    if action is None:
        return ParseResult.failure(text)
    return ParseResult.success(action)


def parse_level_size(text: str | None) -> ParseResult[LevelSize]:
    if text is None:
        return ParseResult.failure(text)
    size = LEVEL_VOCABULARY.get(text.rstrip("\r\n"))
    if size is None:
        return ParseResult.failure(text)
    return ParseResult.success(size)
