from library_app.extensions import db
from library_app.utils.dates import format_date

class BorrowedBook(db.Model):
    """
    One outstanding borrow per book: the primary key is the book id itself,
    so a second borrow of the same book is a duplicate-key failure in the store.
    """
    __tablename__ = "borrowed_books"

    book_id = db.Column(
        db.Integer,
        db.ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False,
    )
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    borrowed_from = db.Column(db.Date, nullable=False)
    borrowed_until = db.Column(db.Date, nullable=False)

    def to_dict(self):
        return {
            "book_id": self.book_id,
            "user_id": self.user_id,
            "borrowed_from": format_date(self.borrowed_from),
            "borrowed_until": format_date(self.borrowed_until),
        }
