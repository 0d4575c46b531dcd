# app/utils/general.py
"""
General-purpose utility functions.

This module contains helpers for upload validation, search escaping,
"redirect back" navigation, service result handling and template filters.
"""

from datetime import datetime
from urllib.parse import urlsplit
from flask import current_app, flash, redirect, request, url_for

LIKE_ESCAPE_CHAR = '\\'


def allowed_file(filename):
    """True when the filename carries one of the configured image extensions."""
    allowed = current_app.config['ALLOWED_IMAGE_EXTENSIONS']
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed


def escape_like(text):
    """
    Escapes LIKE wildcards so user input is matched literally.

    Use together with `column.ilike(pattern, escape=LIKE_ESCAPE_CHAR)`.
    """
    return (
        text.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
            .replace('%', LIKE_ESCAPE_CHAR + '%')
            .replace('_', LIKE_ESCAPE_CHAR + '_')
    )


def is_safe_redirect(target):
    """Only same-host relative targets are followed after login."""
    if not target or '\\' in target:
        return False
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc and target.startswith('/')


def redirect_back(default_endpoint='campgrounds.index', **values):
    """Redirects to the page the request came from, or to a default endpoint."""
    referrer = request.referrer
    if referrer:
        parts = urlsplit(referrer)
        if not parts.netloc or parts.netloc == request.host:
            return redirect(referrer)
    return redirect(url_for(default_endpoint, **values))


def _handle_service_result(result, success_url, failure_response=None):
    """
    Turns a service result into a flash message and a redirect.

    Services return {"success": True, "message": ...} on success and
    {"success": False, "error": ...} on failure. On failure the user goes back
    to where they came from unless a failure_response is given.
    """
    if result.get("success"):
        if result.get("message"):
            flash(result["message"], 'success')
        return redirect(success_url)

    flash(result.get("error", "Something went wrong."), 'error')
    if failure_response is not None:
        return failure_response
    return redirect_back()


def time_ago(value, now=None):
    """Jinja filter: renders a datetime as '5 minutes ago'."""
    if value is None:
        return ''
    now = now or datetime.utcnow()
    seconds = int((now - value).total_seconds())
    if seconds < 45:
        return 'a few seconds ago'

    for unit, size in (('year', 31536000), ('month', 2592000), ('day', 86400),
                       ('hour', 3600), ('minute', 60)):
        amount = seconds // size
        if amount >= 1:
            if amount == 1:
                return f'a {unit} ago' if unit != 'hour' else 'an hour ago'
            return f'{amount} {unit}s ago'
    return 'a minute ago'
