# library_app/services/mail_service.py
from __future__ import annotations

from flask import current_app
from flask_mail import Message

from library_app.extensions import mail
from library_app.utils.dates import format_date


REMINDER_SUBJECT = "Reminder: Return Book"


def reminder_body(book_title: str, due_date) -> str:
    return f"Please return '{book_title}' by {format_date(due_date)}."


class MailService:
    """Notification port backed by Flask-Mail."""

    @staticmethod
    def send_email(to_email: str, subject: str, body: str) -> tuple[bool, str | None]:
        """
        return: (success, error_text)
        """
        try:
            msg = Message(subject=subject, recipients=[to_email], body=body)
            mail.send(msg)
            current_app.logger.info(f"[mail] Sent '{subject}' to {to_email}")
            return True, None
        except Exception as e:
            current_app.logger.warning(f"[mail] Could not send mail to {to_email}: {e}")
            return False, str(e)

