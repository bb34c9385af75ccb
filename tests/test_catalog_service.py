import pytest

from bibliotheque.domain import Author, Book, CatalogError, InvalidBookError
from bibliotheque.services import CatalogService, get_catalog_service, reset_all_services


@pytest.fixture
def service():
    service = CatalogService()
    service.add_book("Notre-Dame de Paris", "Victor Hugo")
    service.add_book("Germinal", "Émile Zola")
    service.add_book("Les Misérables", "Hugo, Victor")
    return service


def test_add_book_reuses_author_by_normalized_name(service):
    books = list(service.catalog)
    assert books[0].author is books[2].author
    assert [a.name for a in service.list_authors()] == ["Victor Hugo", "Émile Zola"]


def test_list_descriptions_in_insertion_order(service):
    assert service.list_descriptions() == [
        "Notre-Dame de Paris par Victor Hugo",
        "Germinal par Émile Zola",
        "Les Misérables par Victor Hugo",
    ]
    assert service.render() == "\n".join(service.list_descriptions())


def test_add_existing_book_registers_its_author():
    service = CatalogService()
    zola = Author("Émile Zola")
    service.add(Book("Nana", zola))

    assert service.add_book("Germinal", "emile zola").author is not zola
    assert service.add_book("L'Assommoir", "Émile Zola").author is zola


def test_rejected_book_is_not_cataloged():
    service = CatalogService()
    with pytest.raises(InvalidBookError):
        service.add_book(None, "Victor Hugo")
    with pytest.raises(InvalidBookError):
        service.add("Les Misérables")
    assert service.list_descriptions() == []
    assert service.list_authors() == []


def test_get_book_and_author(service):
    book = list(service.catalog)[1]
    assert service.get_book(book.id) is book
    assert service.get_book("missing") is None
    assert service.get_author(book.author.id) is book.author
    assert service.get_author("missing") is None


def test_count_books_by_author(service):
    hugo, zola = service.list_authors()
    assert service.count_books_by_author(hugo) == 2
    assert service.count_books_by_author(zola) == 1


def test_search_keeps_insertion_order(service):
    assert [b.title for b in service.search("hugo")] == ["Notre-Dame de Paris", "Les Misérables"]
    assert len(service.search("")) == 3
    assert service.search("balzac") == []


def test_sorted_books_orders(service):
    assert [b.title for b in service.sorted_books()] == [
        "Notre-Dame de Paris", "Germinal", "Les Misérables"
    ]
    assert [b.title for b in service.sorted_books("title")] == [
        "Germinal", "Les Misérables", "Notre-Dame de Paris"
    ]
    assert [b.title for b in service.sorted_books("author_last")] == [
        "Les Misérables", "Notre-Dame de Paris", "Germinal"
    ]
    assert [b.title for b in service.sorted_books("author_first")] == [
        "Les Misérables", "Notre-Dame de Paris", "Germinal"
    ]


def test_sorted_books_does_not_mutate_catalog(service):
    before = service.list_descriptions()
    service.sorted_books("title")
    assert service.list_descriptions() == before


def test_unknown_sort_order_raises(service):
    with pytest.raises(CatalogError):
        service.sorted_books("publisher")


def test_seed_demo():
    service = CatalogService()
    service.seed_demo()
    assert service.list_descriptions() == ["Les Misérables par Victor Hugo"]


def test_module_service_is_cached_until_reset():
    service = get_catalog_service(seed_demo=True)
    assert get_catalog_service() is service
    assert service.list_descriptions() == ["Les Misérables par Victor Hugo"]

    reset_all_services()
    assert get_catalog_service() is not service
    assert get_catalog_service().list_descriptions() == []


def test_prebuilt_catalog_keeps_first_author_per_name():
    from bibliotheque.domain import Catalog

    hugo = Author("Victor Hugo")
    hugo_inverted = Author("Hugo, Victor")
    service = CatalogService(Catalog([
        Book("Notre-Dame de Paris", hugo),
        Book("Les Misérables", hugo_inverted),
    ]))

    assert service.add_book("Quatrevingt-treize", "victor hugo").author is hugo


def test_add_keeps_first_author_per_name():
    service = CatalogService()
    hugo = Author("Victor Hugo")
    service.add(Book("Notre-Dame de Paris", hugo))
    service.add(Book("Les Misérables", Author("Hugo, Victor")))

    assert service.add_book("Quatrevingt-treize", "victor hugo").author is hugo
