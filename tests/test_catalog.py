import pytest

from librarydesk.catalog import BookShelf, Catalog, ItemKind, ItemNotFoundError
from librarydesk.items import DVD, AudioCD, Book


@pytest.fixture
def stocked():
    catalog = Catalog()
    book = catalog.add(Book(title="Dune", library_id=7))
    cd = catalog.add(AudioCD(artist="Miles", title="Blue", library_id=8))
    dvd = catalog.add(DVD(title="Alien", library_id=9))
    return catalog, book, cd, dvd


def test_add_keeps_order(stocked):
    catalog, book, cd, dvd = stocked
    assert list(catalog) == [book, cd, dvd]
    assert len(catalog) == 3


def test_get_by_id_any_kind(stocked):
    catalog, book, cd, dvd = stocked
    assert catalog.get_by_id(7) is book
    assert catalog.get_by_id(9) is dvd


def test_get_by_id_missing(stocked):
    catalog, *_ = stocked
    with pytest.raises(ItemNotFoundError) as info:
        catalog.get_by_id(99)
    assert str(info.value) == "Item with Library ID 99 not found!"


def test_items_of_kind(stocked):
    catalog, book, cd, dvd = stocked
    assert catalog.items_of_kind(ItemKind.BOOK) == [book]
    assert catalog.items_of_kind("AudioCD") == [cd]
    assert catalog.items_of_kind(3) == [dvd]


def test_items_of_unknown_kind(stocked):
    catalog, *_ = stocked
    with pytest.raises(ValueError):
        catalog.items_of_kind("Vinyl")
    with pytest.raises(ValueError):
        catalog.items_of_kind(4)


def test_remove_book_by_id_text(stocked):
    catalog, book, cd, dvd = stocked
    assert catalog.remove("7", ItemKind.BOOK) is book
    assert list(catalog) == [cd, dvd]


def test_remove_cd_by_artist_and_dvd_by_title(stocked):
    catalog, book, cd, dvd = stocked
    assert catalog.remove("Miles", ItemKind.AUDIO_CD) is cd
    assert catalog.remove("Alien", ItemKind.DVD) is dvd
    assert list(catalog) == [book]


def test_remove_wrong_kind_fails(stocked):
    catalog, *_ = stocked
    with pytest.raises(ItemNotFoundError) as info:
        catalog.remove("Alien", ItemKind.AUDIO_CD)
    assert str(info.value) == "Item is incorrect and not found."
    assert len(catalog) == 3


def test_remove_only_first_match():
    catalog = Catalog()
    first = catalog.add(DVD(title="Alien"))
    second = catalog.add(DVD(title="Alien"))
    assert catalog.remove("Alien", ItemKind.DVD) is first
    assert list(catalog) == [second]


def test_find_book(stocked):
    catalog, book, cd, dvd = stocked
    assert catalog.find_book(7) is book
    with pytest.raises(ItemNotFoundError) as info:
        catalog.find_book(8)
    assert str(info.value) == "No Library Item found with ID: 8"


def test_find_by_artist_returns_all(stocked):
    catalog, book, cd, dvd = stocked
    other = catalog.add(AudioCD(artist="Miles", title="Kind"))
    assert catalog.find_by_artist("Miles") == [cd, other]
    assert catalog.find_by_artist("Nobody") == []


def test_find_by_title_only_dvds(stocked):
    catalog, book, cd, dvd = stocked
    catalog.add(Book(title="Alien"))
    assert catalog.find_by_title("Alien") == [dvd]
    assert catalog.find_by_title("Dune") == []


def test_item_kind_parse_and_labels():
    assert ItemKind.parse("DVD") is ItemKind.DVD
    assert ItemKind.parse(2) is ItemKind.AUDIO_CD
    assert ItemKind.BOOK.label == "Book"
    assert ItemKind.AUDIO_CD.item_class is AudioCD


def test_item_kind_matches():
    assert ItemKind.BOOK.matches(Book())
    assert not ItemKind.BOOK.matches(DVD())


def test_shelf_add_mirrors_catalog():
    shelf = BookShelf()
    book = shelf.add(Book(title="Emma", library_id=3))
    assert list(shelf) == [book]
    assert shelf.catalog.get_by_id(3) is book
    assert shelf.find(3) is book


def test_shelf_find_missing():
    shelf = BookShelf()
    with pytest.raises(ItemNotFoundError) as info:
        shelf.find(5)
    assert str(info.value) == "Library ID Number does not exist."


def test_shelf_remove():
    shelf = BookShelf()
    keep = shelf.add(Book(library_id=1))
    gone = shelf.add(Book(library_id=2))
    assert shelf.remove(2) is gone
    assert list(shelf) == [keep]
    assert list(shelf.catalog) == [keep]
    with pytest.raises(ItemNotFoundError):
        shelf.remove(2)


def test_shelf_edits_visible_through_catalog():
    shelf = BookShelf()
    book = shelf.add(Book(title="Old", library_id=4))
    shelf.catalog.get_by_id(4).title = "New"
    assert shelf.find(4).title == "New"
    assert book.title == "New"