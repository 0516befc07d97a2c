"""Create catalog tables

Revision ID: 3f9c2a7d1b45
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9c2a7d1b45'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'authors',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('family_name', sa.String(length=100), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('date_of_death', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'genres',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'books',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('author_id', sa.String(length=32), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('isbn', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('books', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_books_title'), ['title'], unique=False)

    op.create_table(
        'book_genres',
        sa.Column('book_id', sa.String(length=32), nullable=False),
        sa.Column('genre_id', sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(['book_id'], ['books.id']),
        sa.ForeignKeyConstraint(['genre_id'], ['genres.id']),
        sa.PrimaryKeyConstraint('book_id', 'genre_id'),
    )
    op.create_table(
        'book_instances',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('book_id', sa.String(length=32), nullable=False),
        sa.Column('imprint', sa.Text(), nullable=False),
        sa.Column('status', sa.Text(), nullable=False),
        sa.Column('due_back', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('book_instances', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_book_instances_book_id'), ['book_id'], unique=False)


def downgrade():
    with op.batch_alter_table('book_instances', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_book_instances_book_id'))
    op.drop_table('book_instances')
    op.drop_table('book_genres')
    with op.batch_alter_table('books', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_books_title'))
    op.drop_table('books')
    op.drop_table('genres')
    op.drop_table('authors')
