from typing import List, NamedTuple


class ReferenceBook(NamedTuple):
    id: str
    title: str


def list_reference_books(store, sort_by_title: bool = False) -> List[ReferenceBook]:
    """Books offered in the book selector of a book instance form.

    Store errors propagate to the caller.
    """
    return [ReferenceBook(row.id, row.title) for row in store.list_book_titles(sort_by_title)]
