from locallibrary import db
from locallibrary.utils import new_id

book_genres = db.Table(
    "book_genres",
    db.Column("book_id", db.String(32), db.ForeignKey("books.id"), primary_key=True),
    db.Column("genre_id", db.String(32), db.ForeignKey("genres.id"), primary_key=True),
)


class Book(db.Model):
    """Catalog books (titles, not physical copies)."""

    __tablename__ = "books"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    title = db.Column(db.String(200), nullable=False, index=True)
    author_id = db.Column(db.String(32), db.ForeignKey("authors.id"), nullable=False)
    summary = db.Column(db.Text, nullable=False)
    isbn = db.Column(db.String(20), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    # Relationships
    author = db.relationship("Author", back_populates="books")
    genres = db.relationship("Genre", secondary=book_genres, back_populates="books")

    @property
    def url(self):
        return f"/catalog/book/{self.id}"

    def __repr__(self):
        return f"<Book {self.title}>"
