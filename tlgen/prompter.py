"""Line-based input provider on top of rich prompts"""

from typing import Optional, TextIO

from rich.console import Console
from rich.prompt import Prompt


class LinePrompt(Prompt):
    """Prompt that reports end of a scripted input stream as EOFError

    `Console.input` returns "" forever once a stream is exhausted, which
    would spin the wizard's re-ask loops.
    """

    @classmethod
    def get_input(cls, console: Console, prompt, password: bool, stream: Optional[TextIO] = None) -> str:
        value = console.input(prompt, password=password, stream=stream)
        if stream is not None and value == "":
            raise EOFError("End of input stream")
        return value


class Prompter:
    """Ask free-form and y/N questions

    Blank answers fall back to the caller's default, so defaults work the
    same for terminal input and for scripted streams.
    """

    def __init__(self, console: Console, stream: Optional[TextIO] = None):
        """Initialize prompter

        Args:
            console: Rich console used to print the questions
            stream: Optional input stream, stdin when omitted
        """
        self.console = console
        self.stream = stream

    def ask(self, prompt_text: str, default: Optional[str] = None) -> str:
        """Ask a question and return the stripped answer"""
        try:
            value = LinePrompt.ask(prompt_text, console=self.console, stream=self.stream)
        except (KeyboardInterrupt, EOFError):
            raise KeyboardInterrupt("User cancelled input")

        value = (value or "").strip()
        if not value and default is not None:
            return default
        return value

    def confirm(self, prompt_text: str) -> bool:
        """Ask a (y/N) question; anything but 'y' means no"""
        return self.ask(f"{prompt_text} (y/N)").lower() == "y"
