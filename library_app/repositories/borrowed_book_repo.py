from datetime import date

from sqlalchemy import select

from library_app.models.borrowed_book import BorrowedBook
from library_app.repositories.base import commit

class BorrowedBookRepo:
    @staticmethod
    def get(session, book_id: int):
        return session.get(BorrowedBook, book_id)

    @staticmethod
    def list_by_user(session, user_id: int):
        return session.scalars(
            select(BorrowedBook).filter_by(user_id=user_id).order_by(BorrowedBook.book_id)
        ).all()

    @staticmethod
    def list_all(session):
        return session.scalars(select(BorrowedBook).order_by(BorrowedBook.book_id)).all()

    @staticmethod
    def borrowed_book_ids(session) -> set:
        return {b.book_id for b in BorrowedBookRepo.list_all(session)}

    @staticmethod
    def create(session, borrow: BorrowedBook):
        session.add(borrow)
        commit(session, "borrowed book entry")
        return borrow

    @staticmethod
    def update(session):
        commit(session, "borrowed book entry")

    @staticmethod
    def delete(session, borrow: BorrowedBook):
        session.delete(borrow)
        commit(session, "borrowed book entry")

    @staticmethod
    def find_due(session, threshold: date):
        return session.scalars(
            select(BorrowedBook)
            .where(BorrowedBook.borrowed_until <= threshold)
            .order_by(BorrowedBook.borrowed_until, BorrowedBook.book_id)
        ).all()
