"""
Request middleware: ownership checks and HTML form method override.

Authentication itself is Flask-Login's `login_required`. The ownership
decorators here are meant to be stacked under it in a fixed order:

    @bp.route('/<int:campground_id>', methods=['PUT'])
    @login_required
    @campground_owner_required
    def update(campground_id):
        campground = g.campground
"""

from functools import wraps
from urllib.parse import parse_qs
from flask import current_app, flash, g
from flask_login import current_user
from app import db, login_manager
from app.models import Campground, Comment
from app.utils import redirect_back

PERMISSION_DENIED = "You don't have permission to do that"


def campground_owner_required(f):
    """
    Decorator that lets only the author of the campground in the URL through.

    On success the loaded campground is stored in g.campground.
    Anonymous users go to the login page; a missing campground or another
    user's campground sends the requester back with an error flash.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()

        campground_id = kwargs.get('campground_id')
        campground = db.session.get(Campground, campground_id)

        if campground is None:
            current_app.logger.warning(f"Ownership check: campground {campground_id} not found")
            flash("Campground not found", 'error')
            return redirect_back()

        if campground.author_id != current_user.id:
            current_app.logger.info(
                f"User {current_user.id} denied access to campground {campground_id} "
                f"(author {campground.author_id})"
            )
            flash(PERMISSION_DENIED, 'error')
            return redirect_back()

        g.campground = campground
        return f(*args, **kwargs)
    return decorated_function


def comment_owner_required(f):
    """
    Decorator that lets only the author of the comment in the URL through.

    The comment must belong to the campground in the URL. On success the
    loaded comment is stored in g.comment.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()

        comment_id = kwargs.get('comment_id')
        comment = db.session.get(Comment, comment_id)

        if comment is None or comment.campground_id != kwargs.get('campground_id'):
            current_app.logger.warning(f"Ownership check: comment {comment_id} not found")
            flash("Comment not found", 'error')
            return redirect_back()

        if comment.author_id != current_user.id:
            current_app.logger.info(
                f"User {current_user.id} denied access to comment {comment_id} "
                f"(author {comment.author_id})"
            )
            flash(PERMISSION_DENIED, 'error')
            return redirect_back()

        g.comment = comment
        return f(*args, **kwargs)
    return decorated_function


class MethodOverrideMiddleware:
    """
    WSGI middleware that dispatches `POST /path?_method=PUT` as `PUT /path`.

    Only POST requests are rewritten, and only to the methods listed in
    ALLOWED_METHODS.
    """

    ALLOWED_METHODS = frozenset(['PUT', 'PATCH', 'DELETE'])
    PARAM = '_method'

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            method = (query.get(self.PARAM) or [''])[0].upper()
            if method in self.ALLOWED_METHODS:
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)
