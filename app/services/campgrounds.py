# app/services/campgrounds.py
# This file holds all the logic for campground listings.

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from app import db
from app.models import Campground, Comment
from app.services.image_host import ImageHostError
from app.utils import allowed_file, escape_like, LIKE_ESCAPE_CHAR

NO_MATCH_MESSAGE = "Campground not found, please try again"


def _image_host():
    return current_app.extensions['image_host']


def _parse_price(value):
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if price < 0:
        return None
    return price


def _discard_upload(asset_id):
    """Removes an image whose campground write failed. Failures are only logged."""
    try:
        _image_host().destroy(asset_id)
    except ImageHostError as e:
        current_app.logger.error(f"Could not remove orphaned image {asset_id}: {e.message}")


def _select_image(image_files, required):
    """
    Picks the single uploaded image out of the form's 'image' parts.

    Browsers send an empty part when no file was chosen; those are ignored.

    Returns:
        tuple: (file or None, error message or None)
    """
    files = [f for f in (image_files or []) if f is not None and f.filename]

    if len(files) > 1:
        return None, "Please upload a single image."
    if not files:
        if required:
            return None, "Please choose an image to upload."
        return None, None
    if not allowed_file(files[0].filename):
        return None, "Only image files are allowed!"
    return files[0], None


# --- READS ---

def search_campgrounds(search=None):
    """
    Lists campgrounds, optionally filtered by a case-insensitive substring of the name.

    Returns:
        dict: {"campgrounds": [...], "no_match": str or None}
        no_match is only set when a search was performed and found nothing.
    """
    query = Campground.query.order_by(Campground.id)
    no_match = None

    if search:
        pattern = f"%{escape_like(search)}%"
        query = query.filter(Campground.name.ilike(pattern, escape=LIKE_ESCAPE_CHAR))

    campgrounds = query.all()
    if search and not campgrounds:
        no_match = NO_MATCH_MESSAGE

    return {"campgrounds": campgrounds, "no_match": no_match}


def get_campground_with_comments(campground_id):
    """
    Loads a campground and its comments in posting order.

    Returns:
        tuple: (campground, comments), or (None, []) if the campground does not exist
    """
    campground = db.session.get(Campground, campground_id)
    if campground is None:
        current_app.logger.warning(f"Campground {campground_id} not found")
        return None, []

    comments = (
        Comment.query
        .filter_by(campground_id=campground.id)
        .order_by(Comment.id)
        .all()
    )
    return campground, comments


# --- WRITES ---

def create_campground(form, image_files, author):
    """
    Validates the form, uploads the image and stores a new campground.

    Nothing is uploaded or written when validation fails. If the database write
    fails, the freshly uploaded image is removed again.
    """
    name = (form.get('name') or '').strip()
    description = form.get('description')
    price = _parse_price(form.get('price'))

    image_file, image_error = _select_image(image_files, required=True)
    if image_error:
        return {"success": False, "error": image_error}
    if not name:
        return {"success": False, "error": "Campground name is required."}
    if price is None:
        return {"success": False, "error": "Price must be a valid number."}

    try:
        uploaded = _image_host().upload(image_file)
    except ImageHostError as e:
        current_app.logger.error(f"Image upload failed for new campground '{name}': {e.message}")
        return {"success": False, "error": e.message}

    try:
        campground = Campground(
            name=name,
            price=price,
            image=uploaded.url,
            image_id=uploaded.asset_id,
            description=description,
            author_id=author.id,
            author_username=author.username
        )
        db.session.add(campground)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Database error creating campground '{name}': {str(e)}")
        _discard_upload(uploaded.asset_id)
        return {"success": False, "error": "Could not save the campground. Please try again."}

    current_app.logger.info(f"Campground {campground.id} created by {author.username}")
    return {"success": True, "campground": campground, "message": "Campground created successfully"}


def update_campground(campground, form, image_files=None):
    """
    Overwrites name, price and description, optionally replacing the image.

    A replacement image is uploaded first; the previous asset is only deleted
    once the new one is stored, so a failed upload leaves the listing untouched.
    """
    name = (form.get('name') or '').strip()
    description = form.get('description')
    price = _parse_price(form.get('price'))

    image_file, image_error = _select_image(image_files, required=False)
    if image_error:
        return {"success": False, "error": image_error}
    replacing_image = image_file is not None
    if not name:
        return {"success": False, "error": "Campground name is required."}
    if price is None:
        return {"success": False, "error": "Price must be a valid number."}

    old_image_id = None
    if replacing_image:
        try:
            uploaded = _image_host().upload(image_file)
        except ImageHostError as e:
            current_app.logger.error(f"Image upload failed for campground {campground.id}: {e.message}")
            return {"success": False, "error": e.message}
        old_image_id = campground.image_id
        campground.image = uploaded.url
        campground.image_id = uploaded.asset_id

    campground.name = name
    campground.price = price
    campground.description = description

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Database error updating campground {campground.id}: {str(e)}")
        if replacing_image:
            _discard_upload(uploaded.asset_id)
        return {"success": False, "error": "Could not update the campground. Please try again."}

    if old_image_id:
        try:
            _image_host().destroy(old_image_id)
        except ImageHostError as e:
            # The listing already points at the new image; the old asset is only orphaned.
            current_app.logger.error(f"Could not delete replaced image {old_image_id}: {e.message}")

    current_app.logger.info(f"Campground {campground.id} updated")
    return {"success": True, "campground": campground, "message": "Updated successfully"}


def delete_campground(campground):
    """
    Deletes the hosted image, then the campground and its comments.

    If the image cannot be deleted the campground is kept.
    """
    try:
        _image_host().destroy(campground.image_id)
    except ImageHostError as e:
        current_app.logger.error(f"Image deletion failed for campground {campground.id}: {e.message}")
        return {"success": False, "error": e.message}

    campground_id = campground.id
    try:
        db.session.delete(campground)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Database error deleting campground {campground_id}: {str(e)}")
        return {"success": False, "error": "Could not delete the campground. Please try again."}

    current_app.logger.info(f"Campground {campground_id} deleted")
    return {"success": True, "message": "Campground deleted successfully"}
