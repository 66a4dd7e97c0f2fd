# bizops/scheduler.py
import os
import logging
from datetime import datetime, timedelta

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

from .errors import BackupError
from .services.backup import backup_now

logger = logging.getLogger(__name__)


def _run_backup(app):
    with app.app_context():
        try:
            backup_now()
        except BackupError as e:
            # scheduled runs log and carry on
            logger.error(f"[backup] Scheduled backup failed: {e}")


def start_scheduler(app):
    """
    Start APScheduler exactly once.
    - One-shot backup BACKUP_INITIAL_DELAY_SECONDS after boot (schema exists by then).
    - Repeating backup every BACKUP_INTERVAL_HOURS.
    """
    if not app.config.get("SCHEDULER_ENABLED", True):
        logger.info("[backup] Scheduler disabled by config.")
        return None
    # Avoid double-start with Flask reloader / multiple imports
    if app.config.get("APSCHEDULER_STARTED"):
        return None
    if os.environ.get("WERKZEUG_RUN_MAIN") == "true" or not app.debug:
        tz = app.config.get("SCHEDULER_TIMEZONE", "UTC")
        delay = app.config["BACKUP_INITIAL_DELAY_SECONDS"]
        hours = app.config["BACKUP_INTERVAL_HOURS"]

        sched = BackgroundScheduler(timezone=tz)
        sched.add_job(lambda: _run_backup(app),
                      DateTrigger(run_date=datetime.now().astimezone() + timedelta(seconds=delay)),
                      id="backup-initial")
        sched.add_job(lambda: _run_backup(app), IntervalTrigger(hours=hours, timezone=tz),
                      id="backup-interval")
        sched.start()
        app.config["APSCHEDULER_STARTED"] = True
        app.extensions["bizops.scheduler"] = sched
        logger.info(f"[backup] Scheduler started (first run in {delay}s, then every {hours}h)")
        return sched

    logger.info("[backup] Skipping scheduler in reloader parent process.")
    return None
