from locallibrary import db
from locallibrary.utils import format_date, new_id


class BookInstanceStatus:
    """Book instance availability constants."""
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"

    CHOICES = [AVAILABLE, MAINTENANCE, LOANED, RESERVED]


class BookInstance(db.Model):
    """Physical copies of a book that can be borrowed."""

    __tablename__ = "book_instances"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    # Plain column: the referenced book is not checked by the database.
    book_id = db.Column(db.String(32), nullable=False, index=True)
    imprint = db.Column(db.Text, nullable=False)
    status = db.Column(db.Text, nullable=False, default=BookInstanceStatus.MAINTENANCE)
    due_back = db.Column(db.Date)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    # Relationships
    book = db.relationship(
        "Book",
        primaryjoin="foreign(BookInstance.book_id) == Book.id",
        uselist=False,
    )

    @property
    def url(self):
        return f"/catalog/bookinstance/{self.id}"

    @property
    def due_back_formatted(self):
        return format_date(self.due_back)

    def __repr__(self):
        return f"<BookInstance {self.id} - {self.imprint}>"
