from locallibrary.models.author import Author
from locallibrary.models.genre import Genre
from locallibrary.models.book import Book, book_genres
from locallibrary.models.book_instance import BookInstance, BookInstanceStatus

__all__ = [
    "Author",
    "Genre",
    "Book",
    "book_genres",
    "BookInstance",
    "BookInstanceStatus",
]
