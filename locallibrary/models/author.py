from locallibrary import db
from locallibrary.utils import new_id


class Author(db.Model):
    """Authors of catalog books."""

    __tablename__ = "authors"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    first_name = db.Column(db.String(100), nullable=False)
    family_name = db.Column(db.String(100), nullable=False)
    date_of_birth = db.Column(db.Date)
    date_of_death = db.Column(db.Date)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    # Relationships
    books = db.relationship("Book", back_populates="author")

    @property
    def name(self):
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    def __repr__(self):
        return f"<Author {self.name}>"
