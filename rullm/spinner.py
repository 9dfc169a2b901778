"""A terminal spinner shown while waiting for a response."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
_INTERVAL = 0.08
_CLEAR_LINE = "\r\x1b[K"


def _blue_bold(text: str) -> str:
    return f"\x1b[1;34m{text}\x1b[0m"


def _cyan(text: str) -> str:
    return f"\x1b[36m{text}\x1b[0m"


class Spinner:
    """An animated message drawn on one line; inert when not writing to a terminal."""

    def __init__(self, message: str, stream: TextIO | None = None) -> None:
        self.message = message
        self.stream = sys.stdout if stream is None else stream
        isatty = getattr(self.stream, "isatty", None)
        self.disabled = not (isatty is not None and isatty())
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def active(self) -> bool:
        """Whether the animation is running."""
        return self._thread is not None and not self._stop_event.is_set()

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _animate(self) -> None:
        styled = _blue_bold(self.message)
        self._write(f"{styled} ")
        for frame_index in range(sys.maxsize):
            if self._stop_event.is_set():
                break
            self._write(f"\r{styled} {_cyan(_FRAMES[frame_index % len(_FRAMES)])} ")
            self._stop_event.wait(_INTERVAL)

    def start(self) -> None:
        """Begin drawing the spinner in the background."""
        if self.disabled or self.active:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._animate, daemon=True)
        self._thread.start()

    def _halt(self) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def stop(self) -> None:
        """Stop the animation and clear the line."""
        if self.disabled:
            return
        self._halt()
        self._write(_CLEAR_LINE)

    def stop_and_replace(self, replacement: str) -> None:
        """Stop the animation and put ``replacement`` in its place."""
        if self.disabled:
            print(replacement, file=self.stream)
            return
        self._halt()
        self._write(f"{_CLEAR_LINE}{replacement}")

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()