# app/services/comments.py
# This file holds all the logic for campground comments.

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from app import db
from app.models import Campground, Comment


def get_campground(campground_id):
    """Returns the campground a comment is posted to, or None."""
    campground = db.session.get(Campground, campground_id)
    if campground is None:
        current_app.logger.warning(f"Comment target campground {campground_id} not found")
    return campground


def create_comment(campground, text, author):
    """Appends a new comment by `author` to the campground's comments."""
    text = (text or '').strip()
    if not text:
        return {"success": False, "error": "Comment text is required."}

    try:
        comment = Comment(
            text=text,
            author_id=author.id,
            author_username=author.username
        )
        campground.comments.append(comment)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Database error adding comment to campground {campground.id}: {str(e)}")
        return {"success": False, "error": "Something went wrong"}

    current_app.logger.info(f"Comment {comment.id} added to campground {campground.id} by {author.username}")
    return {"success": True, "comment": comment, "message": "Successfully added comment"}


def update_comment(comment, text):
    text = (text or '').strip()
    if not text:
        return {"success": False, "error": "Comment text is required."}

    try:
        comment.text = text
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Database error updating comment {comment.id}: {str(e)}")
        return {"success": False, "error": "Could not update the comment."}

    return {"success": True, "comment": comment, "message": "Comment updated"}


def delete_comment(comment):
    comment_id = comment.id
    try:
        db.session.delete(comment)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Database error deleting comment {comment_id}: {str(e)}")
        return {"success": False, "error": "Could not delete the comment."}

    current_app.logger.info(f"Comment {comment_id} deleted")
    return {"success": True, "message": "Comment deleted"}
