import os
import logging
from typing import List, Optional
from dotenv import load_dotenv

from .models import Book

load_dotenv()
logger = logging.getLogger(__name__)

SEED_BOOKS = [
    {
        "id": 1,
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "genre": "Fiction",
        "copiesAvailable": 5,
    },
    {
        "id": 2,
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "genre": "Fiction",
        "copiesAvailable": 3,
    },
    {
        "id": 3,
        "title": "1984",
        "author": "George Orwell",
        "genre": "Dystopian Fiction",
        "copiesAvailable": 7,
    },
]


class BookStore:
    """In-memory, insertion-ordered collection of books."""

    def __init__(self, books: Optional[List[Book]] = None):
        self.books: List[Book] = list(books) if books else []

    def __len__(self):
        return len(self.books)

    def next_id(self) -> int:
        # Not a counter: deleting the highest id frees it for reuse.
        if not self.books:
            return 1
        return max(book.id for book in self.books) + 1

    def find(self, book_id: Optional[int]) -> Optional[Book]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def append(self, book: Book) -> Book:
        self.books.append(book)
        return book

    def remove(self, book: Book):
        for index, current in enumerate(self.books):
            if current is book:
                del self.books[index]
                return


def seeded_store() -> BookStore:
    return BookStore([Book(**record) for record in SEED_BOOKS])


def init_store() -> BookStore:
    if os.getenv("BOOKSTORE_SEED", "true").lower() in {"1", "true", "yes"}:
        store = seeded_store()
    else:
        store = BookStore()
    logger.info(f"Book store initialized with {len(store)} books")
    return store
