#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Utility micro-stopwatch used by the course programs.

A ``Timer`` remembers one start mark between ``start()`` and ``report()``.
Each caller owns its own instance, so independent timing sessions never
share state. ``tic()``/``toc()`` keep the free-function shape of the course
helper on top of a single process-wide timer.
"""
import logging
import sys
import time
from typing import Callable, Dict, Optional, TextIO, Tuple

from es123.formatting import format_number

logger = logging.getLogger(__name__)

# name -> (clock, ticks per second)
CLOCKS: Dict[str, Tuple[Callable[[], int], float]] = {
    "process": (time.process_time_ns, 1e9),
    "perf_counter": (time.perf_counter_ns, 1e9),
}
DEFAULT_CLOCK = "process"


class TimerError(Exception):
    """Custom exception for mis-configuration of the Timer class."""


class Timer:
    def __init__(
        self,
        clock: Optional[Callable[[], int]] = None,
        ticks_per_second: Optional[float] = None,
        clock_name: Optional[str] = None,
    ):
        if clock is not None and clock_name is not None:
            raise TimerError("Pass either a clock or a clock_name, not both.")

        if clock is None:
            name = clock_name or DEFAULT_CLOCK
            if name not in CLOCKS:
                raise TimerError(f"Unknown clock '{name}'. Choose one of: {', '.join(CLOCKS)}")
            clock, default_tps = CLOCKS[name]
            if ticks_per_second is None:
                ticks_per_second = default_tps
        elif ticks_per_second is None:
            raise TimerError("A custom clock needs ticks_per_second.")

        if ticks_per_second <= 0:
            raise TimerError(f"ticks_per_second must be positive, got {ticks_per_second}")

        self._clock = clock
        self.ticks_per_second = ticks_per_second
        self._start_ticks = 0  # clock zero until the first start()

    # ------------------------------------------------------------------
    def _read_clock(self) -> int:
        try:
            return self._clock()
        except OSError as e:
            logger.warning(f"Clock unavailable, using 0: {e}")
            return 0

    # ------------------------------------------------------------------
    def start(self):
        """Mark the start of a new interval, replacing any previous mark."""
        self._start_ticks = self._read_clock()

    # ------------------------------------------------------------------
    def elapsed_seconds(self) -> float:
        """Seconds since the last start() (or since the clock's zero)."""
        return (self._read_clock() - self._start_ticks) / self.ticks_per_second

    # ------------------------------------------------------------------
    def report(self, file: Optional[TextIO] = None) -> float:
        """Print the elapsed time and return it in seconds."""
        elapsed = self.elapsed_seconds()
        print(f"elapsed time: {format_number(elapsed)} seconds", file=file or sys.stdout)
        return elapsed


_default_timer = Timer()


def tic():
    """Start the process-wide timer."""
    _default_timer.start()


def toc(file: Optional[TextIO] = None) -> float:
    """Report the process-wide timer."""
    return _default_timer.report(file)
