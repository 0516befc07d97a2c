"""Pytest configuration and fixtures."""

import pytest
from flask import template_rendered

from locallibrary import create_app, db
from locallibrary.config import TestConfig
from locallibrary.models import Author, Book, BookInstance, BookInstanceStatus


@pytest.fixture()
def app():
    """App bound to a fresh in-memory SQLite database."""
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return app.extensions["catalog_store"]


@pytest.fixture()
def rendered(app):
    """Collect ``(template name, context)`` for every rendered template."""
    records = []

    def record(sender, template, context, **extra):
        records.append((template.name, context))

    template_rendered.connect(record, app)
    yield records
    template_rendered.disconnect(record, app)


@pytest.fixture()
def author(app):
    author = Author(first_name="Ursula", family_name="Le Guin")
    db.session.add(author)
    db.session.commit()
    return author


@pytest.fixture()
def book(app, author):
    book = Book(
        title="The Dispossessed",
        summary="An ambiguous utopia.",
        isbn="9780060512750",
        author=author,
    )
    db.session.add(book)
    db.session.commit()
    return book


@pytest.fixture()
def other_book(app, author):
    book = Book(
        title="A Wizard of Earthsea",
        summary="A boy with a gift for magic.",
        isbn="9780547773742",
        author=author,
    )
    db.session.add(book)
    db.session.commit()
    return book


@pytest.fixture()
def instance(app, book):
    instance = BookInstance(
        book_id=book.id,
        imprint="Harper 1974",
        status=BookInstanceStatus.AVAILABLE,
    )
    db.session.add(instance)
    db.session.commit()
    return instance
