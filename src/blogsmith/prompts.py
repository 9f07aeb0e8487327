"""
Strategies for filling in arguments the caller did not provide.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol

from rich.console import Console
from rich.prompt import Prompt

from .errors import UsageError


class InputResolver(Protocol):
    def resolve(self, name: str, prompt: str) -> str: ...


class StrictInputResolver:
    """Refuse to guess: every missing argument is a usage error."""

    def resolve(self, name: str, prompt: str) -> str:
        raise UsageError(f"{name} argument must be specified")


class PromptInputResolver:
    """Ask for missing arguments on the terminal."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console

    def resolve(self, name: str, prompt: str) -> str:
        while True:
            value = Prompt.ask(prompt, console=self.console).strip()
            if value:
                return value


def default_input_resolver() -> InputResolver:
    """Prompt when attached to a terminal, otherwise fail fast."""
    if sys.stdin is not None and sys.stdin.isatty():
        return PromptInputResolver()
    return StrictInputResolver()
