"""Server-rendered pages: home page and single posts."""

from flask import Blueprint, abort, render_template

from config import SITE_TAGLINE, SITE_TITLE
from services.content import find_post, published_posts

bp = Blueprint("pages", __name__)


@bp.route("/")
def home():
    """Site heading plus every valid post, featured first."""
    return render_template(
        "index.html",
        site_title=SITE_TITLE,
        site_tagline=SITE_TAGLINE,
        posts=published_posts(),
    )


@bp.route("/posts/<slug>")
def post(slug):
    found = find_post(slug)
    if found is None:
        abort(404)
    return render_template("post.html", site_title=SITE_TITLE, post=found)
