# src/monkey/errors.py
"""Exception types for callers that prefer raising over inspecting results,
and rich rendering of both error channels."""
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class MonkeyError(Exception):
    """Base class for all Monkey errors"""


class MonkeySyntaxError(MonkeyError):
    """Raised when parsing produced one or more diagnostics"""

    def __init__(self, errors, filename="<stdin>"):
        self.errors = list(errors)
        self.filename = filename
        super().__init__(f"{len(self.errors)} syntax error(s) in {filename}")


class MonkeyRuntimeError(MonkeyError):
    """Raised when evaluation produced an error value"""

    def __init__(self, message, filename="<stdin>"):
        self.message = message
        self.filename = filename
        super().__init__(message)


def format_error(error):
    if isinstance(error, MonkeySyntaxError):
        lines = [f"parser errors in {error.filename}:"]
        lines.extend(f"  {msg}" for msg in error.errors)
        return "\n".join(lines)
    if isinstance(error, MonkeyRuntimeError):
        return f"ERROR: {error.message}"
    return str(error)


def print_error(error, console=None):
    console = console or Console(stderr=True)
    title = "Syntax Error" if isinstance(error, MonkeySyntaxError) else "Runtime Error"
    console.print(Panel.fit(
        Text(format_error(error)),
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))
