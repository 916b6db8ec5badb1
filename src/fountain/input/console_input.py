from __future__ import annotations

import logging
from typing import Callable, Protocol

from rich.console import Console

from fountain.components.action import Action
from fountain.components.level_layout import LevelSize
from fountain.events.bus import EventBus, EVENT_INPUT_REJECTED
from fountain.input.parser import ParseResult, parse_action, parse_level_size

logger = logging.getLogger(__name__)

ACTION_PROMPT = "What do you want to do? "
LEVEL_PROMPT = "Choose a cavern size (small, medium, large): "


class InputProvider(Protocol):
    """Blocking source of validated player choices."""

    def request_level_size(self) -> LevelSize: ...

    def request_action(self) -> Action: ...


class ConsoleInputProvider:
    """Reads commands line by line until one parses.

    Malformed lines are reported through ``EVENT_INPUT_REJECTED`` and the
    prompt is repeated; nothing malformed ever reaches the caller. EOFError
    from the underlying reader propagates.
    """

    def __init__(
        self,
        event_bus: EventBus,
        console: Console | None = None,
        *,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self.event_bus = event_bus
        self.console = console or Console()
        self._read_line = read_line or self._console_read

    def request_level_size(self) -> LevelSize:
        return self._request(LEVEL_PROMPT, parse_level_size)

    def request_action(self) -> Action:
        return self._request(ACTION_PROMPT, parse_action)

    def _request(self, prompt: str, parse: Callable[[str], ParseResult]):
        while True:
            text = self._read_line(prompt)
            result = parse(text)
            if result.ok:
                return result.value
            logger.debug("Rejected input %r", text)
            self.event_bus.emit(EVENT_INPUT_REJECTED, text=text, message=result.error)

    def _console_read(self, prompt: str) -> str:
        return self.console.input(f"[cyan]{prompt}[/cyan]")
