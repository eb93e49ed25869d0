# Project: taskmill
# Filename: libs/tasks/ledger.py
#
# File Description: the record of which tasks ran in which project
#
# By: Bast
"""Module for tracking which tasks already ran.

This module provides the `TaskLedger` class, the run-once gate of taskmill.
The ledger is a set of ``(task name, project)`` records. A record means the
task was started in that project during this process; it is not removed when
the task fails, only `delete` (used by reenable) and `clear` remove records.

Keying on the project lets the same task run once in each sub-project of an
umbrella while staying idempotent inside one project.

Key Components:
    - TaskLedger: a lock protected set of run records.

Usage:
    - ``if ledger.try_start("compile", project): ...`` runs a task body at
        most once per project.
    - ``ledger.delete("compile", project)`` makes it runnable again.
    - ``ledger.clear()`` between two independent top level invocations.

Classes:
    - `TaskLedger`: Represents the record of started tasks.

"""

# Standard Library
import logging
import threading
from collections.abc import Hashable

# 3rd Party

# Project

logger = logging.getLogger(__name__)

Record = tuple[str, Hashable]


class TaskLedger:
    """A thread safe set of ``(task name, project)`` records.

    The lock is only held while the set is read or changed, never while a
    task runs.

    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: set[Record] = set()

    def try_start(self, task: str, project: Hashable) -> bool:
        """Record a task as started unless it already is.

        Args:
            task: The task name.
            project: The identity of the project the task runs in.

        Returns:
            True if the record was added and the caller should run the task,
            False if the task already ran in that project.

        """
        record = (task, project)
        with self._lock:
            if record in self._records:
                started = False
            else:
                self._records.add(record)
                started = True
        if not started:
            logger.debug("%s already ran in %s", task, project)
        return started

    def put(self, task: str, project: Hashable) -> None:
        """Record a task as started whether or not it already was."""
        with self._lock:
            self._records.add((task, project))

    def has_run(self, task: str, project: Hashable) -> bool:
        with self._lock:
            return (task, project) in self._records

    def delete(self, task: str, project: Hashable) -> None:
        """Remove one record, nothing happens if it is not there."""
        with self._lock:
            self._records.discard((task, project))

    def clear(self) -> None:
        """Remove every record for every task and project."""
        with self._lock:
            self._records.clear()

    def snapshot(self) -> frozenset[Record]:
        """Return a copy of all the records."""
        with self._lock:
            return frozenset(self._records)

    def __contains__(self, record: object) -> bool:
        with self._lock:
            return record in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
