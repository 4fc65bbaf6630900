"""Background tick scheduler for the age monitors.

APScheduler-based job that evaluates every enabled monitor once per
interval. The host supplies a provider returning a fresh MonitorContext
for each tick; all monitors in a tick share its reference time.
"""

import uuid
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from device_age.config import settings
from device_age.core.monitor import AgeMonitor
from device_age.logging_config import evaluation_id_ctx, get_logger, setup_logging
from device_age.monitors import get_monitor
from device_age.ports import MonitorContext

logger = get_logger(__name__)

ContextProvider = Callable[[], MonitorContext]

# Global scheduler instance
scheduler: AsyncIOScheduler | None = None


def run_monitor_tick(
    context: MonitorContext,
    monitors: list[AgeMonitor],
) -> dict[str, int]:
    """Run one tick of every monitor against a shared context.

    A monitor that raises (for example on malformed settings) is logged
    and skipped; the others still run.

    Returns:
        Counts of evaluated monitors, failures and notifications raised.
    """
    success_count = 0
    error_count = 0
    notified_count = 0

    for monitor in monitors:
        try:
            result = monitor.tick(context)
        except Exception as e:
            logger.error(
                "Age monitor evaluation failed",
                monitor=monitor.name,
                error=str(e),
            )
            error_count += 1
            continue

        success_count += 1
        if result is not None and result.notification is not None:
            notified_count += 1

    return {
        "success_count": success_count,
        "error_count": error_count,
        "notified_count": notified_count,
    }


async def check_all_monitors(
    context_provider: ContextProvider,
    monitor_names: list[str] | None = None,
) -> dict[str, int] | None:
    """Scheduled job: build a context and tick every enabled monitor."""
    token = evaluation_id_ctx.set(uuid.uuid4().hex[:12])
    try:
        try:
            context = context_provider()
        except Exception as e:
            logger.error("Failed to build monitor context", error=str(e))
            return None

        names = monitor_names
        if names is None:
            names = settings.enabled_monitors

        monitors: list[AgeMonitor] = []
        unknown_count = 0
        for name in names:
            try:
                monitors.append(get_monitor(name))
            except KeyError:
                logger.error("Unknown age monitor", monitor=name)
                unknown_count += 1

        counts = run_monitor_tick(context, monitors)
        counts["error_count"] += unknown_count
        logger.info("Age monitor tick completed", **counts)
        return counts
    finally:
        evaluation_id_ctx.reset(token)


def start_scheduler(context_provider: ContextProvider) -> AsyncIOScheduler:
    """Start the background scheduler.

    Must be called from within a running event loop.

    Args:
        context_provider: Called once per tick to snapshot host state.

    Returns:
        The started scheduler instance
    """
    global scheduler

    if scheduler is not None:
        logger.warning("Scheduler already running")
        return scheduler

    scheduler = AsyncIOScheduler()

    if settings.monitor_check_enabled:
        scheduler.add_job(
            check_all_monitors,
            trigger=IntervalTrigger(minutes=settings.monitor_check_interval_minutes),
            args=[context_provider],
            id="age_monitor_check",
            name="Device Age Monitor Check",
            replace_existing=True,
            max_instances=1,
        )
        logger.info(
            "Scheduled age monitor job",
            interval_minutes=settings.monitor_check_interval_minutes,
            monitors=settings.enabled_monitors,
        )

    scheduler.start()
    logger.info("Background scheduler started")

    return scheduler


def stop_scheduler() -> None:
    """Stop the background scheduler if it is running."""
    global scheduler

    if scheduler is not None:
        scheduler.shutdown(wait=False)
        scheduler = None
        logger.info("Background scheduler stopped")


def get_scheduler() -> AsyncIOScheduler | None:
    """Get the current scheduler instance, or None if not started."""
    return scheduler


@asynccontextmanager
async def scheduler_lifespan(
    context_provider: ContextProvider,
) -> AsyncGenerator[AsyncIOScheduler, None]:
    """Configure logging and run the scheduler for the enclosed block.

    Intended for a host's startup/shutdown hook.
    """
    setup_logging(
        log_format=settings.log_format,
        log_level=settings.log_level,
        service_name=settings.service_name,
    )
    started = start_scheduler(context_provider)
    try:
        yield started
    finally:
        stop_scheduler()
