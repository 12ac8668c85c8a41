from flask import Blueprint, current_app, jsonify, request

from library_app.extensions import db
from library_app.schemas import SweepIn, load
from library_app.services.mail_service import MailService
from library_app.tasks.reminder import run_due_date_sweep

notif_bp = Blueprint("reminders", __name__, url_prefix="/api/reminders")

@notif_bp.post("/run")
def run_reminders():
    data = load(SweepIn, request.get_json(silent=True) or {})
    report = run_due_date_sweep(db.session, MailService, today=data.today, logger=current_app.logger)
    return jsonify({"success": True, "data": report.to_dict()})
