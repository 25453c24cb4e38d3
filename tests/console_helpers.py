"""Scripted operator input for driving the interactive operations in tests."""
from simbank.console import Console


def scripted(*answers):
    """Return a Console fed from `answers` and the list it writes to."""
    output = []
    replies = iter(answers)

    def fake_input(prompt):
        output.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    return Console(fake_input, output.append), output
