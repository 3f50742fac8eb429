import os
from contextlib import asynccontextmanager
import logging
from fastapi import Body, FastAPI, Depends, Request, Response, status
from dotenv import load_dotenv

from exceptions.exceptions import add_exception_handlers
from .crud import create_book, delete_book, get_book, list_books, update_book
from .models import Book
from .schemas import BookCreate, BookUpdate, parse_book_id
from .storage import BookStore, init_store

from typing import Any, List

load_dotenv()

# Set up logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "store", None) is None:
        app.state.store = init_store()
    yield
    logger.info("Discarding in-memory book store")
    app.state.store = None


app = FastAPI(
    title="Book Store API",
    lifespan=lifespan,
    description="In-memory CRUD endpoints for book records",
    version="1.0.0",
)

add_exception_handlers(app)


def get_store(request: Request) -> BookStore:
    return request.app.state.store


# Endpoints
@app.get("/api/books", response_model=List[Book], status_code=status.HTTP_200_OK)
def read_books(store: BookStore = Depends(get_store)):
    return list_books(store)


@app.get("/api/books/{book_id}", response_model=Book)
def read_book(book_id: str, store: BookStore = Depends(get_store)):
    return get_book(store, parse_book_id(book_id))


@app.post("/api/books", response_model=Book, status_code=status.HTTP_201_CREATED)
def add_book(body: Any = Body(None), store: BookStore = Depends(get_store)):
    book = BookCreate.from_body(body)
    logger.info(f"Received request to add book: {book.title}")
    return create_book(store, book)


@app.put("/api/books/{book_id}", response_model=Book)
def modify_book(
    book_id: str,
    body: Any = Body(None),
    store: BookStore = Depends(get_store),
):
    book_update = BookUpdate.from_body(body)
    logger.info(f"Received update for book {book_id}: {book_update.changes()}")
    return update_book(store, parse_book_id(book_id), book_update)


@app.delete("/api/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_book(book_id: str, store: BookStore = Depends(get_store)):
    delete_book(store, parse_book_id(book_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("BOOKSTORE_HOST", "0.0.0.0")
    port = int(os.getenv("BOOKSTORE_PORT", "3000"))
    uvicorn.run(app, host=host, port=port)
