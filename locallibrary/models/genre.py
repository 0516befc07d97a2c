from locallibrary import db
from locallibrary.utils import new_id


class Genre(db.Model):
    """Book genres (Fantasy, Science Fiction, ...)."""

    __tablename__ = "genres"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    name = db.Column(db.String(100), nullable=False)

    # Relationships
    books = db.relationship("Book", secondary="book_genres", back_populates="genres")

    def __repr__(self):
        return f"<Genre {self.name}>"
