"""Prompt and filesystem capabilities used by the scaffolder.

The CLI talks to the terminal and the disk only through these two
protocols, so generation can run against scripted answers and an in-memory
filesystem in tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


class Prompter(Protocol):
    def ask(self, question: str) -> str | None:
        """Return the user's answer, or ``None`` if input was cancelled."""
        ...


class _BarePrompt(Prompt):
    """Rich prompt without the trailing ": " (questions carry their own marker)."""

    prompt_suffix = ""


class ConsolePrompter:
    """Interactive prompts on the terminal via Rich.

    End-of-input (Ctrl-D) and Ctrl-C count as cancellation.  An empty
    answer is returned as ``""``.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console

    def ask(self, question: str) -> str | None:
        try:
            return _BarePrompt.ask(question, console=self.console)
        except (EOFError, KeyboardInterrupt):
            return None


class ScriptedPrompter:
    """Answers questions from a fixed sequence.

    Once the sequence is exhausted every further question is treated as
    cancelled.  Questions asked are recorded in :attr:`asked`.
    """

    def __init__(self, answers: Iterable[str | None]) -> None:
        self._answers = list(answers)
        self.asked: list[str] = []

    def ask(self, question: str) -> str | None:
        self.asked.append(question)
        if not self._answers:
            return None
        return self._answers.pop(0)


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------


class FileSystem(Protocol):
    def mkdir(self, path: Path) -> None: ...

    def write_text(self, path: Path, content: str) -> None: ...


class DiskFileSystem:
    """The real filesystem.

    ``mkdir`` is not recursive and raises :class:`FileExistsError` if the
    directory is already there; ``write_text`` overwrites existing files.
    """

    def mkdir(self, path: Path) -> None:
        Path(path).mkdir()

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")


class MemoryFileSystem:
    """Records directories and file contents without touching the disk."""

    def __init__(self) -> None:
        self.directories: list[Path] = []
        self.files: dict[Path, str] = {}

    def mkdir(self, path: Path) -> None:
        path = Path(path)
        if path in self.directories:
            raise FileExistsError(f"Directory already exists: {path}")
        self.directories.append(path)

    def write_text(self, path: Path, content: str) -> None:
        self.files[Path(path)] = content
