from flask import Blueprint, request, jsonify

from library_app.errors import NotFoundError
from library_app.extensions import db
from library_app.schemas import BorrowIn, load
from library_app.services.borrow_service import BorrowService
from library_app.utils.request_args import positive_id_arg

borrowed_bp = Blueprint("borrowed_books", __name__, url_prefix="/api/borrowedbooks")


@borrowed_bp.get("")
def list_all():
    borrows = BorrowService.list_all(db.session)
    if not borrows:
        raise NotFoundError("No borrowed book entries.")
    return jsonify({"success": True, "data": [x.to_dict() for x in borrows]})


@borrowed_bp.get("/book")
def get_by_book():
    book_id = positive_id_arg("id", "book ID")
    x = BorrowService.get_by_book(db.session, book_id)
    return jsonify({"success": True, "data": x.to_dict()})


@borrowed_bp.get("/user")
def get_by_user():
    user_id = positive_id_arg("id", "user ID")
    borrows = BorrowService.list_by_user(db.session, user_id)
    if not borrows:
        raise NotFoundError(f"No borrowed book entries for user ID {user_id}.")
    return jsonify({"success": True, "data": [x.to_dict() for x in borrows]})


@borrowed_bp.post("")
def borrow_book():
    data = load(BorrowIn, request.get_json(silent=True))
    x = BorrowService.borrow_book(db.session, data.model_dump())
    resp = jsonify({"success": True, "data": x.to_dict()})
    resp.headers["Location"] = f"/api/borrowedbooks/book?id={x.book_id}"
    return resp, 201


@borrowed_bp.put("")
def update_borrow():
    book_id = positive_id_arg("book_id", "book ID", aliases=("bookId",))
    data = load(BorrowIn, request.get_json(silent=True))
    x = BorrowService.update_borrow(db.session, book_id, data.model_dump())
    return jsonify({"success": True, "data": x.to_dict()})


@borrowed_bp.delete("")
def delete_borrow():
    book_id = positive_id_arg("book_id", "book ID", aliases=("bookId",))
    BorrowService.return_book(db.session, book_id)
    return jsonify({
        "success": True,
        "message": f"Successfully deleted borrowed book entry with bookid={book_id}",
    })
