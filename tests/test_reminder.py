from datetime import date

from conftest import DummyNotifier, seed
from library_app.extensions import mail
from library_app.models.borrowed_book import BorrowedBook
from library_app.repositories.borrowed_book_repo import BorrowedBookRepo
from library_app.services.book_service import BookService
from library_app.services.borrow_service import BorrowService
from library_app.services.user_service import UserService
from library_app.tasks.reminder import ReminderJob, run_due_date_sweep


def _seed(session):
    UserService.create_user(session, {"name": "Ann", "email": "ann@x.com"})
    UserService.create_user(session, {"name": "Bob", "email": "bob@x.com"})
    for title, author in [("Dune", "Herbert"), ("Emma", "Austen"), ("Ulysses", "Joyce"), ("Beloved", "Morrison")]:
        BookService.create_book(session, {"title": title, "author": author})

    for book_id, user_id, until in [
        (1, 1, date(2024, 1, 2)),   # due tomorrow
        (2, 2, date(2023, 12, 20)),  # overdue
        (3, 1, date(2024, 1, 3)),   # due later
        (4, 2, date(2024, 1, 1)),   # due today
    ]:
        BorrowService.borrow_book(session, {
            "book_id": book_id,
            "user_id": user_id,
            "borrowed_from": date(2023, 12, 1),
            "borrowed_until": until,
        })


def test_sweep_notifies_each_due_borrow_once(session, notifier) -> None:
    _seed(session)

    report = run_due_date_sweep(session, notifier, today=date(2024, 1, 1))

    assert report.threshold == date(2024, 1, 2)
    assert report.selected == 3
    assert report.sent == 3
    assert report.failed == 0
    assert report.skipped == []
    assert sorted(notifier.messages) == sorted([
        ("ann@x.com", "Reminder: Return Book", "Please return 'Dune' by 2024-01-02."),
        ("bob@x.com", "Reminder: Return Book", "Please return 'Emma' by 2023-12-20."),
        ("bob@x.com", "Reminder: Return Book", "Please return 'Beloved' by 2024-01-01."),
    ])


def test_sweep_ignores_borrows_due_after_tomorrow(session, notifier) -> None:
    _seed(session)

    run_due_date_sweep(session, notifier, today=date(2023, 12, 1))

    assert notifier.messages == []


def test_sweep_reruns_select_the_same_borrows(session) -> None:
    _seed(session)
    first, second = DummyNotifier(), DummyNotifier()

    run_due_date_sweep(session, first, today=date(2024, 1, 1))
    run_due_date_sweep(session, second, today=date(2024, 1, 1))

    assert sorted(first.messages) == sorted(second.messages)
    assert len(first.messages) == 3
    assert len(BorrowService.list_all(session)) == 4


def test_sweep_skips_borrow_with_missing_reference_and_continues(session, notifier, monkeypatch) -> None:
    _seed(session)
    rows = [
        BorrowedBook(book_id=1, user_id=99, borrowed_from=date(2024, 1, 1), borrowed_until=date(2024, 1, 1)),
        BorrowedBook(book_id=77, user_id=1, borrowed_from=date(2024, 1, 1), borrowed_until=date(2024, 1, 1)),
        BorrowedBook(book_id=2, user_id=2, borrowed_from=date(2024, 1, 1), borrowed_until=date(2024, 1, 2)),
    ]
    monkeypatch.setattr(BorrowedBookRepo, "find_due", staticmethod(lambda session, threshold: rows))

    report = run_due_date_sweep(session, notifier, today=date(2024, 1, 1))

    assert report.skipped == [1, 77]
    assert report.sent == 1
    assert notifier.messages == [
        ("bob@x.com", "Reminder: Return Book", "Please return 'Emma' by 2024-01-02."),
    ]


def test_sweep_failed_send_does_not_stop_the_run(session) -> None:
    _seed(session)
    notifier = DummyNotifier(fail_for={"ann@x.com"})

    report = run_due_date_sweep(session, notifier, today=date(2024, 1, 1))

    assert report.failed == 1
    assert report.sent == 2
    assert {m[0] for m in notifier.messages} == {"bob@x.com"}


def test_sweep_notifier_exception_is_isolated(session) -> None:
    _seed(session)
    notifier = DummyNotifier(raise_for={"bob@x.com"})

    report = run_due_date_sweep(session, notifier, today=date(2024, 1, 1))

    assert report.failed == 2
    assert report.sent == 1
    assert notifier.messages[0][0] == "ann@x.com"


def test_reminder_job_runs_in_its_own_session(app, session, notifier) -> None:
    _seed(session)
    job = ReminderJob(app, notifier)

    report = job(today=date(2024, 1, 1))

    assert report.sent == 3
    assert job.running is False


def test_reminder_job_skips_overlapping_run(app, session, notifier) -> None:
    _seed(session)
    job = ReminderJob(app, notifier)

    job._running.acquire()
    try:
        assert job.running is True
        assert job(today=date(2024, 1, 1)) is None
        assert notifier.messages == []
    finally:
        job._running.release()

    assert job(today=date(2024, 1, 1)).sent == 3


def test_reminder_endpoint_sends_mail(client) -> None:
    seed(
        client,
        users=[("Ann", "ann@x.com")],
        books=[("Dune", "Herbert")],
        borrows=[(1, 1, "2024-01-01", "2024-01-02")],
    )

    with mail.record_messages() as outbox:
        r = client.post("/api/reminders/run", json={"today": "2024-01-01"})

    assert r.status_code == 200
    assert r.get_json()["data"] == {
        "threshold": "2024-01-02",
        "selected": 1,
        "sent": 1,
        "failed": 0,
        "skipped": [],
    }
    assert len(outbox) == 1
    assert outbox[0].recipients == ["ann@x.com"]
    assert outbox[0].subject == "Reminder: Return Book"
    assert "Dune" in outbox[0].body
    assert "2024-01-02" in outbox[0].body


def test_reminder_endpoint_rejects_bad_date(client) -> None:
    r = client.post("/api/reminders/run", json={"today": "01.01.2024"})
    assert r.status_code == 400
    assert r.get_json()["errors"]["today"] == ["Invalid date format"]
