from sqlalchemy import select

from library_app.models.book import Book
from library_app.repositories.base import commit

class BookRepo:
    @staticmethod
    def list_all(session):
        return session.scalars(select(Book).order_by(Book.id)).all()

    @staticmethod
    def get(session, book_id: int):
        return session.get(Book, book_id)

    @staticmethod
    def create(session, book: Book):
        session.add(book)
        commit(session, "book")
        return book

    @staticmethod
    def update(session):
        commit(session, "book")

    @staticmethod
    def delete(session, book: Book):
        session.delete(book)
        commit(session, "book")
