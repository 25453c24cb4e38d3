"""
Console – the prompt/print seam every operation talks through.
"""
from typing import Callable


class Console:
    """Reads operator answers and writes messages. Defaults to the terminal."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self._input = input_func
        self._output = output_func

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def say(self, text: str = "") -> None:
        self._output(text)
