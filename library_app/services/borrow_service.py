from library_app.errors import NotFoundError, ValidationError
from library_app.models.borrowed_book import BorrowedBook
from library_app.repositories.borrowed_book_repo import BorrowedBookRepo


class BorrowService:
    @staticmethod
    def get_by_book(session, book_id: int):
        borrow = BorrowedBookRepo.get(session, book_id)
        if not borrow:
            raise NotFoundError(f"Borrowed book entry for book ID {book_id} not found.")
        return borrow

    @staticmethod
    def list_by_user(session, user_id: int):
        return BorrowedBookRepo.list_by_user(session, user_id)

    @staticmethod
    def list_all(session):
        return BorrowedBookRepo.list_all(session)

    @staticmethod
    def borrow_book(session, data: dict):
        """
        Inserts a borrow row. A book that is already borrowed collides on the
        primary key and the store's rejection surfaces as ValidationError.
        """
        borrow = BorrowedBook(
            book_id=data["book_id"],
            user_id=data["user_id"],
            borrowed_from=data["borrowed_from"],
            borrowed_until=data["borrowed_until"],
        )
        return BorrowedBookRepo.create(session, borrow)

    @staticmethod
    def update_borrow(session, book_id: int, data: dict):
        borrow = BorrowService.get_by_book(session, book_id)

        new_book_id = data.get("book_id", borrow.book_id)
        if new_book_id != borrow.book_id and BorrowedBookRepo.get(session, new_book_id):
            raise ValidationError(
                f"Book with ID {new_book_id} is already borrowed.",
                errors={"book_id": [f"Book with ID {new_book_id} is already borrowed."]},
            )

        for k in ["book_id", "user_id", "borrowed_from", "borrowed_until"]:
            if k in data:
                setattr(borrow, k, data[k])

        BorrowedBookRepo.update(session)
        return borrow

    @staticmethod
    def return_book(session, book_id: int):
        borrow = BorrowService.get_by_book(session, book_id)
        BorrowedBookRepo.delete(session, borrow)
        return borrow
