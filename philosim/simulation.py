"""Threads, forks and the monitor of the dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .parsing import Config


def now_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One diner; takes the right fork first, then the left one."""

    id: int
    right_fork: threading.Lock
    left_fork: threading.Lock
    table: Table
    last_meal: int
    meals_left: int
    thread: threading.Thread | None = field(default=None, repr=False)

    def cycle(self) -> None:
        """Take both forks, eat, put them down, sleep, then think."""
        table = self.table
        with self.right_fork:
            table.log(self, "has taken a fork")
            with self.left_fork:
                table.log(self, "has taken a fork")
                table.log(self, "is eating")
                with table.data_lock:
                    self.last_meal = now_ms()
                    if table.config.counts_meals and self.meals_left > 0:
                        self.meals_left -= 1
                table.wait(table.config.time_to_eat)
        table.log(self, "is sleeping")
        table.wait(table.config.time_to_sleep)
        table.log(self, "is thinking")

    def run(self) -> None:
        """Repeat the eating cycle until the simulation ends."""
        if self.id % 2 == 0:
            time.sleep(0.001)
        while not self.table.ended():
            self.cycle()


class Table:
    """Shared state of one simulation run."""

    def __init__(self, config: Config, out: TextIO | None = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.data_lock = threading.Lock()
        self.print_lock = threading.Lock()
        self.state_lock = threading.Lock()
        self._ended = False
        self.start_time = now_ms()
        count = config.philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = []
        for index in range(count):
            own = self.forks[index]
            neighbour = self.forks[(index + 1) % count]
            ident = index + 1
            right, left = (own, neighbour) if ident % 2 == 0 else (neighbour, own)
            self.philosophers.append(
                Philosopher(
                    id=ident,
                    right_fork=right,
                    left_fork=left,
                    table=self,
                    last_meal=self.start_time,
                    meals_left=config.meals or 0,
                )
            )

    def ended(self) -> bool:
        with self.state_lock:
            return self._ended

    def stop(self) -> None:
        with self.state_lock:
            self._ended = True

    def _write(self, ident: int, message: str) -> None:
        self.out.write(f"{now_ms() - self.start_time} {ident} {message}\n")
        self.out.flush()

    def log(self, philosopher: Philosopher, message: str) -> None:
        """Print a status line unless the simulation has ended."""
        with self.print_lock:
            if self.ended():
                return
            self._write(philosopher.id, message)

    def wait(self, duration_ms: int) -> None:
        """Sleep for ``duration_ms``, returning early once the simulation ends."""
        start = now_ms()
        while now_ms() - start < duration_ms:
            if self.ended():
                break
            time.sleep(0.0001)

    def philosopher_died(self, index: int) -> bool:
        """End the run and report it if philosopher ``index`` starved."""
        philosopher = self.philosophers[index]
        with self.data_lock:
            if now_ms() - philosopher.last_meal <= self.config.time_to_die:
                return False
            self.stop()
            with self.print_lock:
                self._write(philosopher.id, "died")
            return True

    def monitor(self) -> None:
        """Watch the philosophers until one dies or all have eaten enough."""
        counts_meals = self.config.counts_meals
        while True:
            all_full = True
            for index, philosopher in enumerate(self.philosophers):
                if self.philosopher_died(index):
                    return
                with self.data_lock:
                    if counts_meals and philosopher.meals_left > 0:
                        all_full = False
            if counts_meals and all_full:
                self.stop()
                return
            time.sleep(0.001)

    def _lonely_philosopher(self) -> None:
        philosopher = self.philosophers[0]
        self.log(philosopher, "has taken a fork")
        self.wait(self.config.time_to_die)
        self.log(philosopher, "died")

    def start(self) -> bool:
        """Launch the philosopher threads; False when no run could be started.

        A lone philosopher holds a single fork until he dies, and no
        threads are launched for him.
        """
        self.start_time = now_ms()
        with self.state_lock:
            self._ended = False
        if len(self.philosophers) == 1:
            self._lonely_philosopher()
            return False
        for philosopher in self.philosophers:
            philosopher.last_meal = self.start_time
            philosopher.thread = threading.Thread(
                target=philosopher.run, name=f"philosopher-{philosopher.id}", daemon=True
            )
            philosopher.thread.start()
            time.sleep(0.0001)
        return True

    def join(self) -> None:
        for philosopher in self.philosophers:
            if philosopher.thread is not None:
                philosopher.thread.join()

    def run(self) -> bool:
        """Run the whole simulation; True if it ran to its normal end."""
        try:
            started = self.start()
        except BaseException:
            self.stop()
            self.join()
            raise
        if started:
            self.monitor()
        self.join()
        return started