# app/routes/campgrounds.py
# (This file holds all campground listing routes.)

from flask import Blueprint, request, render_template, redirect, url_for, abort, flash, g
from flask_login import login_required, current_user
from app.middleware import campground_owner_required
from app.utils import _handle_service_result, redirect_back
from app.services.campgrounds import (
    search_campgrounds,
    get_campground_with_comments,
    create_campground,
    update_campground,
    delete_campground
)

bp = Blueprint('campgrounds', __name__)

@bp.route('', methods=['GET'])
def index():
    """Lists all campgrounds, or those whose name contains ?search=."""
    search = request.args.get('search', '')
    result = search_campgrounds(search or None)
    return render_template(
        'campgrounds/index.html',
        campgrounds=result["campgrounds"],
        no_match=result["no_match"],
        search=search
    )

@bp.route('/new', methods=['GET'])
@login_required
def new():
    return render_template('campgrounds/new.html')

@bp.route('', methods=['POST'])
@login_required
def create():
    result = create_campground(request.form, request.files.getlist('image'), current_user)
    if not result.get("success"):
        flash(result["error"], 'error')
        return redirect_back('campgrounds.new')

    flash(result["message"], 'success')
    return redirect(url_for('campgrounds.show', campground_id=result["campground"].id))

@bp.route('/<int:campground_id>', methods=['GET'])
def show(campground_id):
    campground, comments = get_campground_with_comments(campground_id)
    if campground is None:
        abort(404)
    return render_template('campgrounds/show.html', campground=campground, comments=comments)

@bp.route('/<int:campground_id>/edit', methods=['GET'])
@login_required
@campground_owner_required
def edit(campground_id):
    return render_template('campgrounds/edit.html', campground=g.campground)

@bp.route('/<int:campground_id>', methods=['PUT'])
@login_required
@campground_owner_required
def update(campground_id):
    result = update_campground(g.campground, request.form, request.files.getlist('image'))
    return _handle_service_result(result, url_for('campgrounds.show', campground_id=campground_id))

@bp.route('/<int:campground_id>', methods=['DELETE'])
@login_required
@campground_owner_required
def destroy(campground_id):
    result = delete_campground(g.campground)
    return _handle_service_result(result, url_for('campgrounds.index'))
