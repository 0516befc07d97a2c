from flask import current_app

from locallibrary.services.catalog_store import CatalogStore
from locallibrary.services.reference_data import ReferenceBook, list_reference_books
from locallibrary.services.validation import (
    BOOK_INSTANCE_CREATE_RULES,
    BOOK_INSTANCE_UPDATE_RULES,
    BookInstanceForm,
    FieldChain,
    FieldError,
    ValidationResult,
    validate,
)


def get_store() -> CatalogStore:
    """Return the catalog store attached to the current app."""
    return current_app.extensions["catalog_store"]


__all__ = [
    "CatalogStore",
    "get_store",
    "ReferenceBook",
    "list_reference_books",
    "BOOK_INSTANCE_CREATE_RULES",
    "BOOK_INSTANCE_UPDATE_RULES",
    "BookInstanceForm",
    "FieldChain",
    "FieldError",
    "ValidationResult",
    "validate",
]
