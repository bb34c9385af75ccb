"""
Catalog API Endpoints

Provides JSON access to the catalog: listing, lookup and insertion of books,
a plain-text rendering of every entry, and the distinct authors.
"""

from flask import Blueprint, Response, current_app, jsonify, request

from ..domain.errors import CatalogError
from ..services import get_catalog_service

# Create API blueprints
books_api = Blueprint('books_api', __name__, url_prefix='/api/v1/books')
authors_api = Blueprint('authors_api', __name__, url_prefix='/api/v1/authors')


def _service():
    return get_catalog_service(seed_demo=current_app.config.get('CATALOG_SEED_DEMO', False))


def serialize_book(book):
    """Convert domain book to API response format."""
    return {
        'id': book.id,
        'title': book.title,
        'author': book.author.name,
        'author_id': book.author.id,
        'description': book.describe(),
    }


def serialize_author(author, book_count):
    return {
        'id': author.id,
        'name': author.name,
        'book_count': book_count,
    }


def _error(message, status_code):
    return jsonify({
        'status': 'error',
        'message': message,
    }), status_code


@books_api.errorhandler(CatalogError)
def handle_catalog_error(e):
    current_app.logger.warning(f"Catalog error: {e.message}")
    return _error(e.message, 400)


@books_api.route('', methods=['GET'])
def get_books():
    """Get cataloged books, optionally filtered by `q` and ordered by `sort`."""
    service = _service()
    query = request.args.get('q')
    order = request.args.get('sort', 'insertion')

    books = service.sorted_books(order, service.search(query))
    books_data = [serialize_book(book) for book in books]

    return jsonify({
        'status': 'success',
        'data': books_data,
        'count': len(books_data)
    }), 200


@books_api.route('/render', methods=['GET'])
def render_books():
    """Every catalog entry as one text line, in insertion order."""
    return Response(_service().render(), mimetype='text/plain')


@books_api.route('/<book_id>', methods=['GET'])
def get_book(book_id):
    """Get a specific book by ID."""
    book = _service().get_book(book_id)
    if not book:
        return _error('Book not found', 404)

    return jsonify({
        'status': 'success',
        'data': serialize_book(book)
    }), 200


@books_api.route('', methods=['POST'])
def create_book():
    """Create a new book from `{"title": ..., "author": ...}`."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error('JSON data required', 400)

    # Validate required fields
    for field_name in ('title', 'author'):
        if field_name not in data:
            return _error(f"{field_name.capitalize()} is required", 400)
        if not isinstance(data[field_name], str):
            return _error(f"{field_name.capitalize()} must be a string", 400)

    book = _service().add_book(data['title'], data['author'])
    current_app.logger.info(f"Created book {book.id} via API")

    return jsonify({
        'status': 'success',
        'message': 'Book created successfully',
        'data': serialize_book(book)
    }), 201


@authors_api.route('', methods=['GET'])
def get_authors():
    """Distinct authors in order of first appearance."""
    service = _service()
    authors_data = [
        serialize_author(author, service.count_books_by_author(author))
        for author in service.list_authors()
    ]
    return jsonify({
        'status': 'success',
        'data': authors_data,
        'count': len(authors_data)
    }), 200
