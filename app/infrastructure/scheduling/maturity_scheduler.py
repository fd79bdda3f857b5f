"""
Periodic maturity job.

Runs the investment maturity use case on a fixed interval with
APScheduler so matured investments settle without an external cron.
The HTTP trigger remains available; both paths are idempotent and can
overlap safely.
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.application.investments.dtos import MatureInvestmentsCommand
from app.application.investments.mature_investments import MatureInvestmentsUseCase

logger = logging.getLogger(__name__)

JOB_ID = "mature_investments"


class TaskStatus(Enum):
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class TaskResult:
    """Result of one scheduled maturity run."""

    task_name: str
    status: TaskStatus
    started_at: str
    finished_at: str | None = None
    duration_seconds: float = 0.0
    details: dict = field(default_factory=dict)
    error: str | None = None


class MaturityScheduler:
    """Runs maturity passes in a background thread.

    Usage:
        scheduler = MaturityScheduler(lambda: use_case, interval_seconds=300)
        scheduler.start()
        scheduler.run_now()
        scheduler.stop()
    """

    def __init__(
        self,
        use_case_factory: Callable[[], MatureInvestmentsUseCase],
        interval_seconds: int,
        max_history: int = 200,
    ) -> None:
        self._use_case_factory = use_case_factory
        self._interval = interval_seconds
        self._max_history = max_history
        self._task_history: list[TaskResult] = []
        self._lock = threading.Lock()
        self._scheduler: Any | None = None

    @property
    def is_running(self) -> bool:
        return self._scheduler is not None

    @property
    def task_history(self) -> list[TaskResult]:
        with self._lock:
            return list(self._task_history)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the interval job. A non-positive interval disables it."""
        if self._scheduler is not None:
            logger.warning("Maturity scheduler already running.")
            return
        if self._interval <= 0:
            logger.info("Maturity scheduler disabled (interval %s).", self._interval)
            return

        self._scheduler = BackgroundScheduler(
            timezone="UTC",
            job_defaults={"coalesce": True, "max_instances": 1},
        )
        self._scheduler.add_job(
            self.run_now,
            IntervalTrigger(seconds=self._interval),
            id=JOB_ID,
            name="Investment maturity",
        )
        self._scheduler.start()
        logger.info("Maturity scheduler started (every %ds).", self._interval)

    def stop(self) -> None:
        """Shut the scheduler down without waiting for a running pass."""
        if self._scheduler is None:
            return
        self._scheduler.shutdown(wait=False)
        self._scheduler = None
        logger.info("Maturity scheduler stopped.")

    # ------------------------------------------------------------------
    # Task
    # ------------------------------------------------------------------

    def run_now(self) -> TaskResult:
        """Execute one maturity pass immediately (blocking)."""
        start = time.monotonic()
        started_at = datetime.now(timezone.utc).isoformat()
        try:
            report = self._use_case_factory().execute(MatureInvestmentsCommand())
            result = TaskResult(
                task_name=JOB_ID,
                status=TaskStatus.COMPLETED,
                started_at=started_at,
                finished_at=datetime.now(timezone.utc).isoformat(),
                duration_seconds=round(time.monotonic() - start, 2),
                details={"updated": report.updated, "failed": list(report.failed)},
            )
        except Exception as exc:
            result = TaskResult(
                task_name=JOB_ID,
                status=TaskStatus.FAILED,
                started_at=started_at,
                finished_at=datetime.now(timezone.utc).isoformat(),
                duration_seconds=round(time.monotonic() - start, 2),
                error=str(exc),
            )
            logger.exception("Scheduled maturity run failed.")

        self._record_result(result)
        return result

    def _record_result(self, result: TaskResult) -> None:
        with self._lock:
            self._task_history.append(result)
            if len(self._task_history) > self._max_history:
                self._task_history = self._task_history[-self._max_history:]
