"""Entity store for the catalog collections."""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from locallibrary.models import Author, Book, BookInstance, BookInstanceStatus, Genre

logger = logging.getLogger(__name__)


class CatalogStore:
    """Reads and writes catalog documents through a Flask-SQLAlchemy handle.

    Every write commits immediately. On failure the session is rolled back and
    the SQLAlchemy error is re-raised unchanged; nothing is retried.
    """

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    # ------------------------------------------------------------------
    # Books (reference data)
    # ------------------------------------------------------------------

    def list_book_titles(self, sort_by_title: bool = False) -> list:
        """Return ``(id, title)`` rows for every book."""
        stmt = select(Book.id, Book.title)
        if sort_by_title:
            stmt = stmt.order_by(Book.title)
        return self.session.execute(stmt).all()

    def count(self, model, **filters) -> int:
        """Count documents of *model*, optionally filtered by column equality."""
        stmt = select(func.count()).select_from(model).filter_by(**filters)
        return self.session.execute(stmt).scalar_one()

    def catalog_counts(self) -> dict:
        return {
            "book_count": self.count(Book),
            "book_instance_count": self.count(BookInstance),
            "book_instance_available_count": self.count(
                BookInstance, status=BookInstanceStatus.AVAILABLE
            ),
            "author_count": self.count(Author),
            "genre_count": self.count(Genre),
        }

    # ------------------------------------------------------------------
    # Book instances
    # ------------------------------------------------------------------

    def list_book_instances(self) -> List[BookInstance]:
        """Return all book instances with their book loaded."""
        stmt = select(BookInstance).options(joinedload(BookInstance.book))
        return list(self.session.execute(stmt).scalars())

    def get_book_instance(self, id: str, populate_book: bool = False) -> Optional[BookInstance]:
        """Return the book instance with *id*, or None."""
        if not id:
            return None
        options = [joinedload(BookInstance.book)] if populate_book else None
        return self.session.get(BookInstance, id, options=options)

    def create_book_instance(self, form) -> BookInstance:
        """Persist a new book instance built from *form* and return it."""
        instance = BookInstance(
            book_id=form.book,
            imprint=form.imprint,
            status=form.status if form.status is not None else BookInstanceStatus.MAINTENANCE,
            due_back=form.due_back,
        )
        self.session.add(instance)
        self._commit()
        logger.info("Created book instance %s for book %s", instance.id, instance.book_id)
        return instance

    def replace_book_instance(self, id: str, form) -> Optional[BookInstance]:
        """Overwrite every field of the book instance *id* with *form*.

        The identifier is never taken from *form*. Returns None when no
        document has that identifier.
        """
        instance = self.get_book_instance(id)
        if instance is None:
            return None

        instance.book_id = form.book
        instance.imprint = form.imprint
        instance.status = form.status if form.status is not None else BookInstanceStatus.MAINTENANCE
        instance.due_back = form.due_back
        self._commit()
        logger.info("Updated book instance %s", id)
        return instance

    def delete_book_instance(self, id: str) -> bool:
        """Delete the book instance *id*. Missing documents are not an error."""
        instance = self.get_book_instance(id)
        if instance is None:
            logger.info("Book instance %s already gone", id)
            return False

        self.session.delete(instance)
        self._commit()
        logger.info("Deleted book instance %s", id)
        return True

    def rollback(self):
        """Discard uncommitted changes after a failed request."""
        self.session.rollback()

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.rollback()
            raise
