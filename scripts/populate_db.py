#!/usr/bin/env python3
"""
Populate the catalog with sample authors, genres, books and book instances.

Usage:
    python scripts/populate_db.py

Uses DATABASE_URL from the environment (or .env). Tables are created if they
do not exist yet; run `flask db upgrade` first for a migrated database.
"""

import sys
from datetime import date

# Add parent directory to path for imports
sys.path.insert(0, ".")

from locallibrary import create_app, db
from locallibrary.models import Author, Book, BookInstance, BookInstanceStatus, Genre

AUTHORS = [
    ("Patrick", "Rothfuss", date(1973, 6, 6), None),
    ("Ben", "Bova", date(1932, 11, 8), None),
    ("Isaac", "Asimov", date(1920, 1, 2), date(1992, 4, 6)),
    ("Bob", "Billings", None, None),
    ("Jim", "Jones", date(1971, 12, 16), None),
]

GENRES = ["Fantasy", "Science Fiction", "French Poetry"]

# (title, summary, isbn, author index, genre indexes)
BOOKS = [
    ("The Name of the Wind (The Kingkiller Chronicle, #1)",
     "I have stolen princesses back from sleeping barrow kings.",
     "9781473211896", 0, [0]),
    ("The Wise Man's Fear (The Kingkiller Chronicle, #2)",
     "Picking up the tale of Kvothe Kingkiller once again.",
     "9788401352836", 0, [0]),
    ("The Slow Regard of Silent Things (Kingkiller Chronicle)",
     "Deep below the University, there is a dark place.",
     "9780756411336", 0, [0]),
    ("Apes and Angels",
     "Humankind headed out to the stars not for conquest, nor exploration.",
     "9780765379528", 1, [1]),
    ("Death Wave",
     "In Ben Bova's previous novel New Earth, Jordan Kell led the first human mission.",
     "9780765379504", 1, [1]),
    ("Test Book 1", "Summary of test book 1", "ISBN111111", 4, [0, 1]),
    ("Test Book 2", "Summary of test book 2", "ISBN222222", 4, []),
]

# (book index, imprint, status, due_back)
BOOK_INSTANCES = [
    (0, "London Gollancz, 2014.", BookInstanceStatus.AVAILABLE, None),
    (1, " Gollancz, 2011.", BookInstanceStatus.LOANED, date(2026, 11, 2)),
    (2, " Gollancz, 2015.", BookInstanceStatus.AVAILABLE, None),
    (3, "New York Tom Doherty Associates, 2016.", BookInstanceStatus.AVAILABLE, None),
    (3, "New York Tom Doherty Associates, 2016.", BookInstanceStatus.AVAILABLE, None),
    (3, "New York Tom Doherty Associates, 2016.", BookInstanceStatus.AVAILABLE, None),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", BookInstanceStatus.AVAILABLE, None),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", BookInstanceStatus.MAINTENANCE, None),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", BookInstanceStatus.LOANED, None),
    (0, "Imprint XXX2", BookInstanceStatus.MAINTENANCE, None),
    (1, "Imprint XXX3", BookInstanceStatus.MAINTENANCE, None),
]


def populate():
    app = create_app()

    with app.app_context():
        db.create_all()
        print("Populating catalog...")

        try:
            authors = [
                Author(first_name=first, family_name=family, date_of_birth=born, date_of_death=died)
                for first, family, born, died in AUTHORS
            ]
            genres = [Genre(name=name) for name in GENRES]
            db.session.add_all(authors + genres)
            db.session.flush()
            print(f"  Added {len(authors)} authors and {len(genres)} genres")

            books = []
            for title, summary, isbn, author_idx, genre_idxs in BOOKS:
                books.append(Book(
                    title=title,
                    summary=summary,
                    isbn=isbn,
                    author=authors[author_idx],
                    genres=[genres[i] for i in genre_idxs],
                ))
            db.session.add_all(books)
            db.session.flush()
            print(f"  Added {len(books)} books")

            instances = [
                BookInstance(book_id=books[book_idx].id, imprint=imprint, status=status, due_back=due_back)
                for book_idx, imprint, status, due_back in BOOK_INSTANCES
            ]
            db.session.add_all(instances)
            db.session.commit()
            print(f"  Added {len(instances)} book instances")
            print("Done!")

        except Exception as e:
            print(f"Error: {e}")
            db.session.rollback()
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(populate())
