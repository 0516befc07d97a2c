from flask import Blueprint, abort, redirect, render_template, request, url_for

from locallibrary.models import BookInstanceStatus
from locallibrary.services import (
    BOOK_INSTANCE_CREATE_RULES,
    BOOK_INSTANCE_UPDATE_RULES,
    BookInstanceForm,
    get_store,
    list_reference_books,
    validate,
)

bp = Blueprint("book_instances", __name__)


@bp.context_processor
def inject_status_choices():
    return {"status_choices": BookInstanceStatus.CHOICES}


@bp.route("/bookinstances")
def index():
    """List all book instances."""
    bookinstances = get_store().list_book_instances()
    return render_template(
        "bookinstance_list.html",
        title="Book Instance List",
        bookinstance_list=bookinstances,
    )


@bp.route("/bookinstance/create", methods=["GET", "POST"])
def create():
    """Create a new book instance."""
    store = get_store()

    if request.method == "POST":
        result = validate(request.form, BOOK_INSTANCE_CREATE_RULES)
        bookinstance = BookInstanceForm.from_values(result.values, request.form)

        if result.has_errors:
            return render_template(
                "bookinstance_form.html",
                title="Create BookInstance",
                book_list=list_reference_books(store),
                selected_book=bookinstance.book,
                errors=result.errors,
                bookinstance=bookinstance,
            )

        created = store.create_book_instance(bookinstance)
        return redirect(created.url)

    return render_template(
        "bookinstance_form.html",
        title="Create BookInstance",
        book_list=list_reference_books(store),
    )


@bp.route("/bookinstance/<id>")
def detail(id):
    """Show a single book instance."""
    bookinstance = get_store().get_book_instance(id, populate_book=True)

    if bookinstance is None:
        abort(404, description="Book copy not found")

    book_title = bookinstance.book.title if bookinstance.book else ""
    return render_template(
        "bookinstance_detail.html",
        title=f"Copy: {book_title}",
        bookinstance=bookinstance,
    )


@bp.route("/bookinstance/<id>/delete", methods=["GET", "POST"])
def delete(id):
    """Confirm and delete a book instance."""
    store = get_store()

    if request.method == "POST":
        if store.get_book_instance(id) is None:
            return redirect(url_for("book_instances.index"))

        # The form's id names the document to delete, not the URL.
        store.delete_book_instance(request.form.get("bookInstanceId"))
        return redirect(url_for("book_instances.index"))

    bookinstance = store.get_book_instance(id, populate_book=True)
    if bookinstance is None:
        return redirect(url_for("book_instances.index"))

    return render_template(
        "bookinstance_delete.html",
        title="Delete Book Instance",
        bookinstance=bookinstance,
    )


@bp.route("/bookinstance/<id>/update", methods=["GET", "POST"])
def update(id):
    """Edit a book instance."""
    store = get_store()

    if request.method == "POST":
        result = validate(request.form, BOOK_INSTANCE_UPDATE_RULES)

        if result.has_errors:
            # The book list is not reloaded here.
            return render_template(
                "bookinstance_form.html",
                title="Update BookInstance",
                bookinstance=request.form.to_dict(),
                errors=result.errors,
            )

        replacement = BookInstanceForm.from_values(result.values, request.form)
        updated = store.replace_book_instance(id, replacement)
        if updated is None:
            abort(404, description="Book Instance not found")

        return redirect(updated.url)

    bookinstance = store.get_book_instance(id)
    book_list = list_reference_books(store, sort_by_title=True)

    if bookinstance is None:
        abort(404, description="Book Instance not found")

    return render_template(
        "bookinstance_form.html",
        title="Update Book Instance",
        bookinstance=bookinstance,
        book_list=book_list,
    )
