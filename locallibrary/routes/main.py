from flask import Blueprint, render_template, redirect, url_for

from locallibrary.services import get_store

bp = Blueprint("main", __name__)


@bp.route("/")
def home():
    return redirect(url_for("main.catalog"))


@bp.route("/catalog")
def catalog():
    """Catalog home page with document counts."""
    counts = get_store().catalog_counts()
    return render_template("index.html", title="Local Library Home", **counts)
