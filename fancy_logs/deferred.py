"""
Deferred log queue used while a Logger is paused.

Why pause a logger at all?
  CLI tools often run a step whose output should only be shown once the step
  has finished: a spinner is on screen, a prompt is waiting for input, or the
  lines are only interesting if the step failed. Pausing collects the log
  calls in memory, and resume_logger() prints them afterwards, optionally
  through a filter that decides which ones are still worth showing.

Why store MessageRecords instead of rendered lines?
  Rendering is the expensive and side-effecting part (width measurement,
  escape codes, writing to a stream). Storing the normalized record keeps
  pausing cheap, lets the resume filter inspect structured fields like
  `record.action` instead of parsing text, and means a replayed line is
  byte-for-byte what a direct call would have printed.

Drain behavior:
  - FIFO, oldest entry first; the filter is called once per entry.
  - Entries are removed from the buffer as they are processed. If a filter or
    the sink raises, the failing entry is dropped, every entry after it stays
    queued for the next resume, and the exception propagates to the caller.
  - A second resume with nothing queued in between renders nothing.

Reentrancy:
  Calling resume again from inside a drain (from a filter or a sink) is not
  supported: the nested call is ignored with a warning. Log calls made during
  a drain are rendered immediately, since the queue is already active again.

Not thread-safe. Share one Logger across threads only with external locking.
"""

from collections import deque
from collections.abc import Callable
from typing import TypeVar

from .console import err_console
from .messages import MessageRecord

T = TypeVar("T")

FilterFn = Callable[[MessageRecord], bool]


class DeferredQueue:
    """Pause/resume state machine with a FIFO buffer of records."""

    def __init__(self) -> None:
        self._entries: deque[MessageRecord] = deque()
        self._paused = False
        self._draining = False

    @property
    def paused(self) -> bool:
        return self._paused

    def pause(self) -> None:
        self._paused = True

    def push(self, record: MessageRecord) -> None:
        self._entries.append(record)

    def resume(
        self, render: Callable[[MessageRecord], T], filter_fn: FilterFn | None = None
    ) -> list[T]:
        """Leave the paused state and render every buffered record in order.

        Records for which `filter_fn` returns False are dropped. The filter is
        called exactly once per buffered record.
        """
        if self._draining:
            err_console.print(
                "[yellow]Warning: resume_logger() called while draining paused logs; ignored[/yellow]"
            )
            return []

        self._paused = False

        # Take the current buffer so records queued by a pause() made during
        # the drain wait for the next resume instead of joining this one.
        remaining, self._entries = self._entries, deque()

        rendered: list[T] = []
        self._draining = True
        try:
            while remaining:
                entry = remaining.popleft()
                if filter_fn is None or filter_fn(entry):
                    rendered.append(render(entry))
        finally:
            self._draining = False
            remaining.extend(self._entries)
            self._entries = remaining
        return rendered
