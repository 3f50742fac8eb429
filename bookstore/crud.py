import logging
from numbers import Number
from typing import List, Optional

from exceptions.exceptions import BookNotFoundError, InvalidBookDataError
from .models import Book
from .schemas import BookCreate, BookUpdate
from .storage import BookStore

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_blank(value) -> bool:
    # Empty lists and objects count as given.
    if value is None or value is False or value == "":
        return True
    return _is_number(value) and value == 0


def list_books(store: BookStore) -> List[Book]:
    return store.books


def get_book(store: BookStore, book_id: Optional[int]) -> Book:
    book = store.find(book_id)
    if book is None:
        raise BookNotFoundError(book_id)
    return book


def create_book(store: BookStore, item: BookCreate) -> Book:
    if _is_blank(item.title) or _is_blank(item.author):
        raise InvalidBookDataError()

    book = Book(
        id=store.next_id(),
        title=item.title,
        author=item.author,
        genre="Unknown" if _is_blank(item.genre) else item.genre,
        copies_available=(
            item.copies_available if _is_number(item.copies_available) else 0
        ),
    )
    store.append(book)
    logger.info(f"Created book {book.id}: {book.title}")
    return book


def update_book(store: BookStore, book_id: Optional[int], book_update: BookUpdate) -> Book:
    book = get_book(store, book_id)
    for field, value in book_update.changes().items():
        setattr(book, field, value)
    return book


def delete_book(store: BookStore, book_id: Optional[int]):
    book = get_book(store, book_id)
    store.remove(book)
    logger.info(f"Deleted book {book_id}")
