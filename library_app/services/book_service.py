from library_app.errors import NotFoundError
from library_app.models.book import Book
from library_app.repositories.book_repo import BookRepo
from library_app.repositories.borrowed_book_repo import BorrowedBookRepo

class BookService:
    @staticmethod
    def list_books(session, borrowed=None):
        books = BookRepo.list_all(session)
        if borrowed is None:
            return books

        # set-membership over the whole borrow list; fine for a small library
        borrowed_ids = BorrowedBookRepo.borrowed_book_ids(session)
        return [b for b in books if (b.id in borrowed_ids) == borrowed]

    @staticmethod
    def get_book(session, book_id: int):
        book = BookRepo.get(session, book_id)
        if not book:
            raise NotFoundError(f"Book with ID {book_id} not found.")
        return book

    @staticmethod
    def create_book(session, data: dict):
        book = Book(title=data["title"], author=data["author"])
        return BookRepo.create(session, book)

    @staticmethod
    def update_book(session, book_id: int, data: dict):
        book = BookService.get_book(session, book_id)
        for k in ["title", "author"]:
            if k in data:
                setattr(book, k, data[k])

        BookRepo.update(session)
        return book

    @staticmethod
    def delete_book(session, book_id: int):
        book = BookService.get_book(session, book_id)
        BookRepo.delete(session, book)
        return book
