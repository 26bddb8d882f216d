"""
Progress reporting for TOut sample-size sweeps.

A sweep visits ``n = 1, 2, ...`` and usually stops well before its
ceiling. Callbacks therefore receive ``(n, max_n)``: the sample size just
evaluated and the ceiling of the sweep. When the sweep ends, the last
reported ``n`` is where it stopped, not ``max_n``.
"""

import sys
from typing import Callable, Optional


class SearchCancelled(Exception):
    """Raised when a sweep is cancelled by the user."""


class SweepProgress:
    """Forwards visited sample sizes to a ``(n, max_n)`` callback.

    If the callback has a ``close(n)`` method it is called once by
    ``finish`` with the sample size the sweep stopped at (0 when nothing
    was evaluated).
    """

    def __init__(self, max_n: int, callback: Callable[[int, int], None]):
        self.max_n = max_n
        self._callback = callback
        self.last_n = 0

    def start(self):
        self.last_n = 0
        self._callback(0, self.max_n)

    def visit(self, n: int):
        """Report that sample size *n* has been evaluated."""
        self.last_n = n
        self._callback(n, self.max_n)

    def finish(self):
        close = getattr(self._callback, "close", None)
        if close is not None:
            close(self.last_n)


class PrintReporter:
    """Console reporter, rewrites ``\\rSweep: n = 24 of max_n = 193`` on stderr."""

    def __call__(self, n: int, max_n: int):
        sys.stderr.write(f"\rSweep: n = {n} of max_n = {max_n}")
        sys.stderr.flush()

    def close(self, n: int):
        sys.stderr.write(f"\rSweep: stopped at n = {n}\n")
        sys.stderr.flush()


class TqdmReporter:
    """Optional tqdm progress bar over ``1..max_n`` (lazy import).

    An early stop leaves the bar at the stopping ``n``.

    Usage::

        from tout.progress import TqdmReporter
        tout_design(0.5, 0.7, 0.05, 0.2, progress_callback=TqdmReporter())
    """

    def __init__(self, **tqdm_kwargs):
        self._tqdm_kwargs = tqdm_kwargs
        self._bar = None

    def __call__(self, n: int, max_n: int):
        from tqdm import tqdm

        if self._bar is None:
            self._bar = tqdm(total=max_n, unit="n", **self._tqdm_kwargs)
        if n > self._bar.n:
            self._bar.update(n - self._bar.n)

    def close(self, n: int):
        if self._bar is not None:
            self._bar.set_postfix(stopped_at=n)
            self._bar.close()
            self._bar = None


def resolve_reporter(progress_callback, max_n: int, print_results: bool = False) -> Optional[SweepProgress]:
    """Turn the user-facing ``progress_callback`` argument into a ``SweepProgress``.

    - ``None``: use ``PrintReporter`` when *print_results* is ``True``.
    - ``False``: no progress.
    - callable ``(n, max_n)``: custom callback, optionally with ``close(n)``.

    Returns ``None`` when there is nothing to report or the ceiling is
    below 1 (the sweep is then empty).
    """
    if progress_callback is None:
        callback = PrintReporter() if print_results else None
    elif progress_callback is False:
        callback = None
    else:
        callback = progress_callback

    if callback is None or max_n < 1:
        return None
    return SweepProgress(max_n, callback)
