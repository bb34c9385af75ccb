"""
Bibliotheque CLI Tool

Command-line interface for the catalog: the demonstration listing,
ad-hoc listings with search and ordering, and the development API server.
"""

import argparse
import logging
import sys

from .domain import Author, Book, Catalog, CatalogError
from .services import SORT_KEYS, CatalogService

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def write_catalog(catalog, out=None):
    """Write every catalog entry to `out` (stdout by default), one per line."""
    out = out or sys.stdout
    for line in catalog.list_all():
        out.write(f"{line}\n")


def run_demo(args=None):
    """Catalog one book by Victor Hugo and print the listing."""
    author = Author("Victor Hugo")
    book = Book("Les Misérables", author)
    catalog = Catalog()
    catalog.add(book)
    write_catalog(catalog)
    return True


def _parse_book_arg(value):
    """Parse a 'Title::Author' pair."""
    title, sep, author_name = value.partition('::')
    if not sep:
        raise argparse.ArgumentTypeError(f"expected 'Title::Author', got '{value}'")
    return title.strip(), author_name.strip()


def list_books(args):
    """List the demo catalog plus any books given on the command line."""
    service = CatalogService()
    if not args.no_demo:
        service.seed_demo()
    for title, author_name in args.book or []:
        service.add_book(title, author_name)

    books = service.sorted_books(args.sort, service.search(args.search))
    logger.debug(f"Listing {len(books)} of {len(service.catalog)} books")
    for book in books:
        print(book.describe())
    return True


def add_book(args):
    """Catalog one book and print its description line."""
    service = CatalogService()
    if not args.no_demo:
        service.seed_demo()
    book = service.add_book(args.title, args.author)
    logger.debug(f"Catalog now holds {len(service.catalog)} books")
    print(book.describe())
    return True


def serve(args):
    """Run the Flask development server."""
    from . import create_app

    app = create_app()
    host = args.host or app.config['API_HOST']
    port = args.port or app.config['API_PORT']
    print(f"Serving {app.config['SITE_NAME']} on http://{host}:{port}")
    app.run(host=host, port=port, debug=app.config.get('DEBUG_MODE', False))
    return True


def build_parser():
    parser = argparse.ArgumentParser(
        prog='bibliotheque',
        description='Small library catalog of books and their authors'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    demo_parser = subparsers.add_parser('demo', help='Print the demonstration catalog')
    demo_parser.set_defaults(func=run_demo)

    list_parser = subparsers.add_parser('list', help='List cataloged books')
    list_parser.add_argument('--book', action='append', type=_parse_book_arg,
                             help="Add a book as 'Title::Author' (repeatable)")
    list_parser.add_argument('--search', help='Only list books matching these words')
    list_parser.add_argument('--sort', choices=list(SORT_KEYS), default='insertion',
                             help='Listing order')
    list_parser.add_argument('--no-demo', action='store_true', help='Do not seed the demo book')
    list_parser.set_defaults(func=list_books)

    add_parser = subparsers.add_parser('add', help='Catalog a book and print its entry')
    add_parser.add_argument('title', help='Book title')
    add_parser.add_argument('author', help='Author name')
    add_parser.add_argument('--no-demo', action='store_true', help='Do not seed the demo book')
    add_parser.set_defaults(func=add_book)

    serve_parser = subparsers.add_parser('serve', help='Run the JSON API')
    serve_parser.add_argument('--host', help='Bind address')
    serve_parser.add_argument('--port', type=int, help='Port')
    serve_parser.set_defaults(func=serve)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    func = getattr(args, 'func', run_demo)
    try:
        success = func(args)
    except CatalogError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0 if success else 1
