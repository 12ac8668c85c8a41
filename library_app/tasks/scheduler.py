# library_app/tasks/scheduler.py
from __future__ import annotations

import atexit
import os
from datetime import datetime, timezone

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from library_app.services.mail_service import MailService
from library_app.tasks.reminder import ReminderJob


JOB_ID = "due_date_reminder_job"


def start_scheduler(app, notifier=None):
    """
    Runs the due-date sweep on a background thread every REMINDER_INTERVAL_HOURS.
    - First run happens right away (unless SCHEDULER_RUN_AT_STARTUP is off), then once per interval.
    - max_instances=1 on the APScheduler side, plus ReminderJob's own guard.
    - Debug reloader: only the real process starts it.
    """
    if not app.config.get("SCHEDULER_ENABLED", True):
        app.logger.info("[scheduler] Disabled by config.")
        return None

    # Werkzeug reloader runs two processes; WERKZEUG_RUN_MAIN=true marks the real one
    if app.debug and os.environ.get("WERKZEUG_RUN_MAIN") != "true":
        app.logger.info("[scheduler] Debug reloader secondary process: scheduler skipped.")
        return None

    job = ReminderJob(app, notifier or MailService)
    hours = float(app.config.get("REMINDER_INTERVAL_HOURS", 24))

    scheduler = BackgroundScheduler(timezone=app.config.get("SCHEDULER_TIMEZONE", "UTC"))
    job_options = {}
    if app.config.get("SCHEDULER_RUN_AT_STARTUP", True):
        job_options["next_run_time"] = datetime.now(timezone.utc)
    scheduler.add_job(
        func=job,
        trigger=IntervalTrigger(hours=hours),
        id=JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
        **job_options,
    )
    scheduler.start()
    app.logger.info(f"[scheduler] Due-date reminder job started (every {hours:g} hours).")

    app.extensions["apscheduler"] = scheduler
    app.extensions["reminder_job"] = job
    atexit.register(stop_scheduler, app)
    return scheduler


def stop_scheduler(app):
    """Stops the timer; an in-flight sweep is allowed to finish."""
    scheduler = app.extensions.pop("apscheduler", None)
    if scheduler and scheduler.running:
        scheduler.shutdown(wait=True)
        app.logger.info("[scheduler] Scheduler shutdown.")
