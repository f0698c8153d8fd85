"""Index-based playback over a finished step sequence.

``StepPlayer`` has no clock. A driver (GUI timer, CLI loop, test) calls
``tick()`` at its own interval; the player advances one frame per tick and
pauses itself on the final frame.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from pathtrace.model.step import StepSnapshot


class StepPlayer:
    """Cursor over a step sequence with play/pause and scrubbing."""

    def __init__(self, steps: Sequence[StepSnapshot]) -> None:
        if not steps:
            raise ValueError("StepPlayer requires at least one step.")
        self._steps: Tuple[StepSnapshot, ...] = tuple(steps)
        self._index = 0
        self._playing = False

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> StepSnapshot:
        return self._steps[self._index]

    @property
    def at_end(self) -> bool:
        return self._index == len(self._steps) - 1

    @property
    def is_playing(self) -> bool:
        return self._playing

    def play(self) -> None:
        """Start advancing on ``tick()``; restarts from frame 0 when at the end."""
        if self.at_end:
            self._index = 0
        self._playing = not self.at_end

    def pause(self) -> None:
        self._playing = False

    def reset(self) -> None:
        self._index = 0
        self._playing = False

    def tick(self) -> StepSnapshot:
        """Advance one frame while playing and return the current frame.

        Reaching the final frame pauses playback; further ticks keep returning
        it.
        """
        if self._playing and not self.at_end:
            self._index += 1
        if self.at_end:
            self._playing = False
        return self.current

    def step_forward(self) -> StepSnapshot:
        self.pause()
        return self.seek(min(self._index + 1, len(self._steps) - 1))

    def step_back(self) -> StepSnapshot:
        self.pause()
        return self.seek(max(self._index - 1, 0))

    def seek(self, index: int) -> StepSnapshot:
        """Jump to ``index``; negative values count from the end.

        Raises:
            IndexError: If ``index`` is out of range.
        """
        size = len(self._steps)
        if not -size <= index < size:
            raise IndexError(f"Step index {index} out of range for {size} steps.")
        self._index = index % size
        return self.current

    def frames(self) -> Iterator[StepSnapshot]:
        """Play from the current frame to the end, yielding each frame once."""
        yield self.current
        self._playing = not self.at_end
        while self._playing:
            yield self.tick()
