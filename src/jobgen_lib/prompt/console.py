# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

from rich.console import Console, RenderableType
from rich.text import Text

from jobgen_lib.core.config import CFG
from jobgen_lib.core.error import JobgenError

from .interface import PromptChannelInterface


class ConsolePromptChannel(PromptChannelInterface):
    """
    Implementation of PromptChannelInterface for an interactive terminal.
    """

    def __init__(self, console: Console | None = None):
        """
        Initialize the channel.

        Args:
            console (Console | None): Optional Rich Console instance.
                If None, a new Console writing to stdout will be created.
        """
        self._console = console or Console()

    def ask(self, question: str) -> str:
        try:
            answer = self._console.input(self._formatQuestion(question))
        except EOFError as e:
            self._console.print()
            raise JobgenError(
                f"Input ended before answering '{question}'. No script was generated."
            ) from e

        return answer.rstrip("\r\n")

    def askBlock(self, question: str) -> str:
        self._console.print(self._formatQuestion(question))
        return sys.stdin.read()

    def show(self, renderable: RenderableType) -> None:
        self._console.print(renderable)

    def info(self, message: str) -> None:
        self._console.print(Text(message, style=CFG.prompt.info_style))

    def _formatQuestion(self, question: str) -> Text:
        """
        Create a styled question prefixed with the prompt marker.
        """
        return Text(CFG.prompt.marker, style=CFG.prompt.marker_style) + Text(
            f"   {question} ", style=CFG.prompt.question_style
        )
