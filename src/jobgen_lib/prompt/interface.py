# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from abc import ABC, abstractmethod

from rich.console import RenderableType


class PromptChannelInterface(ABC):
    """
    Abstract base class for communicating with the operator.
    """

    @abstractmethod
    def ask(self, question: str) -> str:
        """
        Ask a question and read a single line of the answer.

        Args:
            question (str): The question to display.

        Returns:
            str: The answer without the trailing newline.

        Raises:
            JobgenError: If the input has ended before a line was read.
        """
        pass

    @abstractmethod
    def askBlock(self, question: str) -> str:
        """
        Ask a question and read the answer until the end of input.

        Args:
            question (str): The question to display.

        Returns:
            str: Everything the operator entered, unmodified.
        """
        pass

    @abstractmethod
    def show(self, renderable: RenderableType) -> None:
        """
        Display information to the operator.

        Args:
            renderable (RenderableType): Text or any rich renderable.
        """
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        """
        Report the progress of the session to the operator.

        Args:
            message (str): Plain status message. It is never interpreted as markup.
        """
        pass
