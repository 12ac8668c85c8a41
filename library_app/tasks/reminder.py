# library_app/tasks/reminder.py
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import date, timedelta

from sqlalchemy.orm import Session

from library_app.extensions import db
from library_app.models.book import Book
from library_app.models.user import User
from library_app.repositories.borrowed_book_repo import BorrowedBookRepo
from library_app.services.mail_service import REMINDER_SUBJECT, reminder_body
from library_app.utils.dates import format_date


log = logging.getLogger(__name__)


@dataclass
class SweepReport:
    threshold: date
    selected: int = 0
    sent: int = 0
    failed: int = 0
    skipped: list[int] = field(default_factory=list)

    def to_dict(self):
        return {
            "threshold": format_date(self.threshold),
            "selected": self.selected,
            "sent": self.sent,
            "failed": self.failed,
            "skipped": list(self.skipped),
        }


def run_due_date_sweep(session, notifier, today: date | None = None, logger=None) -> SweepReport:
    """
    Sends one return reminder per borrow due tomorrow or earlier.

    Overdue borrows are picked up again on every run until the entry is
    deleted; nothing is written back to the store. A borrow whose user or
    book cannot be resolved is logged and skipped, and a failed send is
    counted; neither stops the rest of the run.
    """
    logger = logger or log
    today = today or date.today()
    threshold = today + timedelta(days=1)
    report = SweepReport(threshold=threshold)

    due_rows = BorrowedBookRepo.find_due(session, threshold)
    report.selected = len(due_rows)

    for b in due_rows:
        user = session.get(User, b.user_id)
        book = session.get(Book, b.book_id)
        if user is None or book is None:
            logger.warning(
                f"[reminder] Skipping borrow of book {b.book_id}: "
                f"{'user ' + str(b.user_id) if user is None else 'book'} not found"
            )
            report.skipped.append(b.book_id)
            continue

        try:
            ok, err = notifier.send_email(
                user.email, REMINDER_SUBJECT, reminder_body(book.title, b.borrowed_until)
            )
        except Exception as e:
            logger.exception(f"[reminder] Notifier raised for book {b.book_id}: {e}")
            ok, err = False, str(e)

        if ok:
            report.sent += 1
        else:
            report.failed += 1
            logger.warning(f"[reminder] Reminder for book {b.book_id} to {user.email} failed: {err}")

    logger.info(
        f"[reminder] threshold={format_date(threshold)} selected={report.selected} "
        f"sent={report.sent} failed={report.failed} skipped={len(report.skipped)}"
    )
    return report


class ReminderJob:
    """
    Scheduler entry point for the sweep. Each run gets its own Session (its
    own transaction) and a run that starts while another is in progress
    returns None without touching the store.
    """

    def __init__(self, app, notifier):
        self.app = app
        self.notifier = notifier
        self._running = threading.Lock()

    @property
    def running(self) -> bool:
        return self._running.locked()

    def __call__(self, today: date | None = None):
        if not self._running.acquire(blocking=False):
            self.app.logger.warning("[reminder] Previous sweep still running, this run is skipped.")
            return None
        try:
            with self.app.app_context():
                with Session(db.engine) as session, session.begin():
                    return run_due_date_sweep(
                        session, self.notifier, today=today, logger=self.app.logger
                    )
        finally:
            self._running.release()
