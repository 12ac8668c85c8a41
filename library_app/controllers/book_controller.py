# library_app/controllers/book_controller.py

from flask import Blueprint, request, jsonify

from library_app.extensions import db
from library_app.schemas import BookIn, load
from library_app.services.book_service import BookService
from library_app.utils.request_args import optional_bool_arg, positive_id_arg

book_bp = Blueprint("books", __name__, url_prefix="/api/books")


@book_bp.get("")
def get_books():
    if "id" in request.args:
        book_id = positive_id_arg("id", "book ID")
        b = BookService.get_book(db.session, book_id)
        return jsonify({"success": True, "data": b.to_dict()})

    borrowed = optional_bool_arg("borrowed")
    books = BookService.list_books(db.session, borrowed=borrowed)
    return jsonify({"success": True, "data": [b.to_dict() for b in books]})


@book_bp.post("")
def create_book():
    data = load(BookIn, request.get_json(silent=True))
    b = BookService.create_book(db.session, data.model_dump())
    resp = jsonify({"success": True, "data": b.to_dict()})
    resp.headers["Location"] = f"/api/books?id={b.id}"
    return resp, 201


@book_bp.put("")
def update_book():
    book_id = positive_id_arg("id", "book ID")
    data = load(BookIn, request.get_json(silent=True))
    b = BookService.update_book(db.session, book_id, data.model_dump())
    return jsonify({"success": True, "data": b.to_dict()})


@book_bp.delete("")
def delete_book():
    book_id = positive_id_arg("id", "book ID")
    BookService.delete_book(db.session, book_id)
    return jsonify({"success": True, "message": f"Successfully deleted book with id={book_id}"})
