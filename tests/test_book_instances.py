"""Tests for the book instance routes (/catalog/bookinstance*)."""

from datetime import date

from locallibrary import db
from locallibrary.models import BookInstance, BookInstanceStatus


def _count_instances():
    return db.session.query(BookInstance).count()


class TestList:
    def test_lists_instances_with_book(self, client, rendered, instance, book):
        resp = client.get("/catalog/bookinstances")

        assert resp.status_code == 200
        template, context = rendered[-1]
        assert template == "bookinstance_list.html"
        assert context["title"] == "Book Instance List"
        assert [bi.id for bi in context["bookinstance_list"]] == [instance.id]
        assert context["bookinstance_list"][0].book.title == book.title
        assert b"The Dispossessed" in resp.data

    def test_empty_list(self, client, rendered):
        resp = client.get("/catalog/bookinstances")

        assert resp.status_code == 200
        assert rendered[-1][1]["bookinstance_list"] == []
        assert b"There are no book copies" in resp.data


class TestDetail:
    def test_detail(self, client, rendered, instance, book):
        resp = client.get(f"/catalog/bookinstance/{instance.id}")

        assert resp.status_code == 200
        template, context = rendered[-1]
        assert template == "bookinstance_detail.html"
        assert context["title"] == f"Copy: {book.title}"
        assert context["bookinstance"].id == instance.id

    def test_unknown_id_is_not_found(self, client, rendered):
        resp = client.get("/catalog/bookinstance/doesnotexist")

        assert resp.status_code == 404
        template, context = rendered[-1]
        assert template == "error.html"
        assert context["message"] == "Book copy not found"
        assert b"Book copy not found" in resp.data


class TestCreate:
    def test_get_renders_empty_form(self, client, rendered, book, other_book):
        resp = client.get("/catalog/bookinstance/create")

        assert resp.status_code == 200
        template, context = rendered[-1]
        assert template == "bookinstance_form.html"
        assert context["title"] == "Create BookInstance"
        assert {b.title for b in context["book_list"]} == {book.title, other_book.title}
        assert "errors" not in context
        assert "bookinstance" not in context

    def test_valid_post_persists_and_redirects(self, client, book):
        resp = client.post(
            "/catalog/bookinstance/create",
            data={"book": book.id, "imprint": "Penguin 2020", "status": "Loaned", "due_back": "2026-11-02"},
        )

        assert resp.status_code == 302
        created = db.session.query(BookInstance).one()
        assert resp.location.endswith(f"/catalog/bookinstance/{created.id}")
        assert created.book_id == book.id
        assert created.imprint == "Penguin 2020"
        assert created.status == "Loaned"
        assert created.due_back == date(2026, 11, 2)

    def test_missing_status_defaults_to_maintenance(self, client, book):
        resp = client.post("/catalog/bookinstance/create", data={"book": book.id, "imprint": "Tor"})

        assert resp.status_code == 302
        assert db.session.query(BookInstance).one().status == BookInstanceStatus.MAINTENANCE

    def test_empty_book_rerenders_with_error(self, client, rendered, book):
        resp = client.post(
            "/catalog/bookinstance/create",
            data={"book": "", "imprint": "Penguin 2020", "status": "Available"},
        )

        assert resp.status_code == 200
        assert _count_instances() == 0
        template, context = rendered[-1]
        assert template == "bookinstance_form.html"
        assert context["title"] == "Create BookInstance"
        assert [e.message for e in context["errors"]] == ["Book must be specified"]
        assert context["bookinstance"].imprint == "Penguin 2020"
        assert context["bookinstance"].status == "Available"
        assert [b.id for b in context["book_list"]] == [book.id]

    def test_empty_imprint_keeps_selected_book(self, client, rendered, book):
        resp = client.post("/catalog/bookinstance/create", data={"book": book.id, "imprint": " "})

        assert resp.status_code == 200
        assert _count_instances() == 0
        context = rendered[-1][1]
        assert [e.message for e in context["errors"]] == ["Imprint must be specified"]
        assert context["selected_book"] == book.id
        assert f'value="{book.id}" selected'.encode() in resp.data

    def test_invalid_date_rerenders(self, client, rendered, book):
        resp = client.post(
            "/catalog/bookinstance/create",
            data={"book": book.id, "imprint": "Tor", "due_back": "31/12/2026"},
        )

        assert resp.status_code == 200
        assert _count_instances() == 0
        assert [e.message for e in rendered[-1][1]["errors"]] == ["Invalid date"]

    def test_book_existence_is_not_checked(self, client):
        resp = client.post("/catalog/bookinstance/create", data={"book": "nosuchbook", "imprint": "Tor"})

        assert resp.status_code == 302
        assert db.session.query(BookInstance).one().book_id == "nosuchbook"

    def test_create_then_detail_round_trip(self, client, rendered, book):
        resp = client.post(
            "/catalog/bookinstance/create",
            data={"book": book.id, "imprint": "Penguin 2020", "status": "Available"},
        )

        client.get(resp.location)

        template, context = rendered[-1]
        assert template == "bookinstance_detail.html"
        assert context["bookinstance"].imprint == "Penguin 2020"
        assert context["bookinstance"].status == "Available"
        assert context["bookinstance"].book.title == book.title

    def test_long_escaped_imprint_and_long_status(self, client, book):
        imprint = "Tor & Sons " * 20
        status = "x" * 60

        resp = client.post(
            "/catalog/bookinstance/create",
            data={"book": book.id, "imprint": imprint, "status": status},
        )

        assert resp.status_code == 302
        created = db.session.query(BookInstance).one()
        assert created.imprint == imprint.strip().replace("&", "&amp;")
        assert len(created.imprint) > 255
        assert created.status == status

    def test_imprint_and_status_columns_are_unbounded(self):
        columns = BookInstance.__table__.c

        assert isinstance(columns.imprint.type, db.Text)
        assert isinstance(columns.status.type, db.Text)
        assert columns.imprint.type.length is None
        assert columns.status.type.length is None

    def test_form_offers_every_status(self, client, rendered, book):
        resp = client.get("/catalog/bookinstance/create")

        assert rendered[-1][1]["status_choices"] == BookInstanceStatus.CHOICES
        for status in BookInstanceStatus.CHOICES:
            assert f'<option value="{status}"'.encode() in resp.data


class TestDelete:
    def test_get_renders_confirmation(self, client, rendered, instance, book):
        resp = client.get(f"/catalog/bookinstance/{instance.id}/delete")

        assert resp.status_code == 200
        template, context = rendered[-1]
        assert template == "bookinstance_delete.html"
        assert context["title"] == "Delete Book Instance"
        assert context["bookinstance"].book.title == book.title

    def test_get_missing_redirects_to_list(self, client):
        resp = client.get("/catalog/bookinstance/missing/delete")

        assert resp.status_code == 302
        assert resp.location.endswith("/catalog/bookinstances")

    def test_post_deletes_and_redirects(self, client, instance):
        instance_id = instance.id

        resp = client.post(
            f"/catalog/bookinstance/{instance_id}/delete",
            data={"bookInstanceId": instance_id},
        )

        assert resp.status_code == 302
        assert resp.location.endswith("/catalog/bookinstances")
        assert db.session.get(BookInstance, instance_id) is None

    def test_post_twice_is_not_an_error(self, client, instance):
        url = f"/catalog/bookinstance/{instance.id}/delete"
        data = {"bookInstanceId": instance.id}

        first = client.post(url, data=data)
        second = client.post(url, data=data)

        assert first.status_code == second.status_code == 302
        assert first.location == second.location

    def test_post_deletes_the_submitted_id(self, client, instance, book):
        other = BookInstance(book_id=book.id, imprint="Second", status=BookInstanceStatus.LOANED)
        db.session.add(other)
        db.session.commit()
        instance_id, other_id = instance.id, other.id

        client.post(f"/catalog/bookinstance/{instance_id}/delete", data={"bookInstanceId": other_id})

        assert db.session.get(BookInstance, other_id) is None
        assert db.session.get(BookInstance, instance_id) is not None


class TestUpdate:
    def test_get_prefills_form(self, client, rendered, instance, book, other_book):
        resp = client.get(f"/catalog/bookinstance/{instance.id}/update")

        assert resp.status_code == 200
        template, context = rendered[-1]
        assert template == "bookinstance_form.html"
        assert context["title"] == "Update Book Instance"
        assert context["bookinstance"].id == instance.id
        # Sorted by title
        assert [b.title for b in context["book_list"]] == [other_book.title, book.title]
        assert f'value="{book.id}" selected'.encode() in resp.data

    def test_get_missing_is_not_found(self, client, rendered):
        resp = client.get("/catalog/bookinstance/missing/update")

        assert resp.status_code == 404
        assert rendered[-1][1]["message"] == "Book Instance not found"

    def test_valid_post_overwrites_and_keeps_id(self, client, instance, other_book):
        instance_id = instance.id

        resp = client.post(
            f"/catalog/bookinstance/{instance_id}/update",
            data={
                "book": other_book.id,
                "imprint": "Gollancz2015",
                "status": "Loaned",
                "due_back": "2026-12-01",
                "id": "someotherid",
            },
        )

        assert resp.status_code == 302
        assert resp.location.endswith(f"/catalog/bookinstance/{instance_id}")
        updated = db.session.get(BookInstance, instance_id)
        assert updated.book_id == other_book.id
        assert updated.imprint == "Gollancz2015"
        assert updated.status == "Loaned"
        assert updated.due_back == date(2026, 12, 1)
        assert _count_instances() == 1

    def test_empty_due_back_clears_date(self, client, instance, book):
        instance.due_back = date(2026, 1, 1)
        db.session.commit()

        client.post(
            f"/catalog/bookinstance/{instance.id}/update",
            data={"book": book.id, "imprint": "Harper1974", "status": "Available", "due_back": ""},
        )

        assert db.session.get(BookInstance, instance.id).due_back is None

    def test_non_alphanumeric_imprint_rerenders(self, client, rendered, instance):
        instance_id = instance.id

        resp = client.post(
            f"/catalog/bookinstance/{instance_id}/update",
            data={"imprint": "ab#1", "due_back": ""},
        )

        assert resp.status_code == 200
        template, context = rendered[-1]
        assert template == "bookinstance_form.html"
        assert context["title"] == "Update BookInstance"
        assert [e.message for e in context["errors"]] == ["Imprint has non-alphanumeric characters"]
        assert context["bookinstance"] == {"imprint": "ab#1", "due_back": ""}
        assert "book_list" not in context
        assert db.session.get(BookInstance, instance_id).imprint == "Harper 1974"

    def test_invalid_delivery_date(self, client, rendered, instance):
        resp = client.post(
            f"/catalog/bookinstance/{instance.id}/update",
            data={"imprint": "Harper1974", "due_back": "tomorrow"},
        )

        assert resp.status_code == 200
        assert [e.message for e in rendered[-1][1]["errors"]] == ["Invalid date of delivery"]

    def test_valid_post_for_missing_id_is_not_found(self, client, book):
        resp = client.post(
            "/catalog/bookinstance/missing/update",
            data={"book": book.id, "imprint": "Tor2016", "status": "Available"},
        )

        assert resp.status_code == 404
        assert _count_instances() == 0
