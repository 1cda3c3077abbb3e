"""Mean over a sliding window of the most recent values."""

from __future__ import annotations

from collections import deque

__all__ = ["RollingMeanAccumulator"]


class RollingMeanAccumulator:
    """Computes the mean of the last ``window_size`` accumulated values."""

    def __init__(self, window_size: int) -> None:
        if window_size <= 0:
            raise ValueError("window size must be positive")
        self._window: deque[float] = deque(maxlen=window_size)
        self._sum = 0.0

    @property
    def window_size(self) -> int:
        """The number of values the mean is taken over once the window is full."""
        return self._window.maxlen or 0

    def __len__(self) -> int:
        return len(self._window)

    def accumulate(self, value: float) -> None:
        """Add ``value`` to the window, dropping the oldest value if it is full."""
        if len(self._window) == self._window.maxlen:
            self._sum -= self._window[0]
        self._sum += value
        self._window.append(value)

    def rolling_mean(self) -> float:
        """Return the mean of the values currently in the window.

        :raises ValueError: if nothing has been accumulated yet.
        """
        if not self._window:
            raise ValueError("no values have been accumulated")
        return self._sum / len(self._window)