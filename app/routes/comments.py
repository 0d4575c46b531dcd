# app/routes/comments.py
# (Comment routes, nested under /campgrounds/<campground_id>/comments.)

from flask import Blueprint, request, render_template, redirect, url_for, flash, g
from flask_login import login_required, current_user
from app.middleware import comment_owner_required
from app.utils import _handle_service_result, redirect_back
from app.services.comments import get_campground, create_comment, update_comment, delete_comment

bp = Blueprint('comments', __name__)

@bp.route('/new', methods=['GET'])
@login_required
def new(campground_id):
    campground = get_campground(campground_id)
    if campground is None:
        flash("Campground not found", 'error')
        return redirect(url_for('campgrounds.index'))
    return render_template('comments/new.html', campground=campground)

@bp.route('', methods=['POST'])
@login_required
def create(campground_id):
    campground = get_campground(campground_id)
    if campground is None:
        flash("Campground not found", 'error')
        return redirect(url_for('campgrounds.index'))

    result = create_comment(campground, request.form.get('text'), current_user)
    return _handle_service_result(result, url_for('campgrounds.show', campground_id=campground_id))

@bp.route('/<int:comment_id>/edit', methods=['GET'])
@login_required
@comment_owner_required
def edit(campground_id, comment_id):
    return render_template('comments/edit.html', campground_id=campground_id, comment=g.comment)

@bp.route('/<int:comment_id>', methods=['PUT'])
@login_required
@comment_owner_required
def update(campground_id, comment_id):
    result = update_comment(g.comment, request.form.get('text'))
    return _handle_service_result(
        result,
        url_for('campgrounds.show', campground_id=campground_id),
        redirect_back('campgrounds.show', campground_id=campground_id)
    )

@bp.route('/<int:comment_id>', methods=['DELETE'])
@login_required
@comment_owner_required
def destroy(campground_id, comment_id):
    result = delete_comment(g.comment)
    return _handle_service_result(
        result,
        url_for('campgrounds.show', campground_id=campground_id),
        redirect_back('campgrounds.show', campground_id=campground_id)
    )
