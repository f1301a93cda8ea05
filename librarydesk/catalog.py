"""The catalogue of lendable items, and a shelf that tracks books on their own."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator

from librarydesk.items import DVD, AudioCD, Book, LibraryItem


class ItemNotFoundError(KeyError):
    """Raised when no catalogue item matches a lookup."""

    def __str__(self) -> str:
        return str(self.args[0])


class ItemKind(IntEnum):
    """The kinds of item the catalogue holds, numbered as in the menus."""

    BOOK = 1
    AUDIO_CD = 2
    DVD = 3

    @property
    def label(self) -> str:
        """The name shown for this kind of item."""
        return _LABELS[self]

    @property
    def item_class(self) -> type[LibraryItem]:
        """The class of items of this kind."""
        return _CLASSES[self]

    def matches(self, item: LibraryItem) -> bool:
        """Whether the item is of this kind."""
        return isinstance(item, self.item_class)

    def key_of(self, item: LibraryItem) -> str:
        """The text that identifies an item of this kind for deletion."""
        if isinstance(item, Book):
            return str(item.library_id)
        if isinstance(item, AudioCD):
            return item.artist
        if isinstance(item, DVD):
            return item.title
        raise TypeError(f"not a catalogue item: {item!r}")

    @classmethod
    def parse(cls, value: ItemKind | int | str) -> ItemKind:
        """Accept a kind, its menu number or its label; raise ValueError otherwise."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for kind in cls:
                if kind.label == value:
                    return kind
            raise ValueError(f"unknown item type {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown item type {value!r}") from None


_LABELS = {ItemKind.BOOK: "Book", ItemKind.AUDIO_CD: "AudioCD", ItemKind.DVD: "DVD"}
_CLASSES: dict[ItemKind, type[LibraryItem]] = {
    ItemKind.BOOK: Book,
    ItemKind.AUDIO_CD: AudioCD,
    ItemKind.DVD: DVD,
}


class Catalog:
    """Books, audio CDs and DVDs in the order they were added."""

    def __init__(self) -> None:
        self._items: list[LibraryItem] = []

    def add(self, item: LibraryItem) -> LibraryItem:
        """Append an item and return it."""
        self._items.append(item)
        return item

    def get_by_id(self, library_id: int) -> LibraryItem:
        """Return the first item of any kind with the library ID number."""
        for item in self._items:
            if item.library_id == library_id:
                return item
        raise ItemNotFoundError(f"Item with Library ID {library_id} not found!")

    def items_of_kind(self, kind: ItemKind | int | str) -> list[LibraryItem]:
        """All items of one kind, in catalogue order."""
        wanted = ItemKind.parse(kind)
        return [item for item in self._items if wanted.matches(item)]

    def remove(self, identifier: str | int, kind: ItemKind | int | str) -> LibraryItem:
        """Remove and return the first item of the kind with the identifier.

        Books are identified by library ID number, audio CDs by artist and
        DVDs by title.
        """
        wanted = ItemKind.parse(kind)
        text = str(identifier)
        for item in self._items:
            if wanted.matches(item) and wanted.key_of(item) == text:
                self._items.remove(item)
                return item
        raise ItemNotFoundError("Item is incorrect and not found.")

    def find_book(self, library_id: int) -> Book:
        """Return the first book with the library ID number."""
        for item in self._items:
            if isinstance(item, Book) and item.library_id == library_id:
                return item
        raise ItemNotFoundError(f"No Library Item found with ID: {library_id}")

    def find_by_artist(self, artist: str) -> list[AudioCD]:
        """Every audio CD by the artist; empty if there are none."""
        return [
            item
            for item in self._items
            if isinstance(item, AudioCD) and item.artist == artist
        ]

    def find_by_title(self, title: str) -> list[DVD]:
        """Every DVD with the title; empty if there are none."""
        return [
            item for item in self._items if isinstance(item, DVD) and item.title == title
        ]

    def __iter__(self) -> Iterator[LibraryItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class BookShelf:
    """Books kept in their own list and mirrored in a catalogue."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self._books: list[Book] = []
        self.catalog = catalog if catalog is not None else Catalog()

    def add(self, book: Book) -> Book:
        """Shelve a book and enter it in the catalogue."""
        self._books.append(book)
        self.catalog.add(book)
        return book

    def find(self, library_id: int) -> Book:
        """Return the first shelved book with the library ID number."""
        for book in self._books:
            if book.library_id == library_id:
                return book
        raise ItemNotFoundError("Library ID Number does not exist.")

    def remove(self, library_id: int) -> Book:
        """Take a book off the shelf and out of the catalogue."""
        book = self.find(library_id)
        self._books.remove(book)
        if book in self.catalog:
            self.catalog.remove(library_id, ItemKind.BOOK)
        return book

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    def __len__(self) -> int:
        return len(self._books)