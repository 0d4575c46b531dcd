# app/services/users.py
# This file holds all the logic for user accounts.

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app import db
from app.models import User


def register_user(username, password):
    """
    Creates a user with a hashed password.

    Returns {"success": True, "user": user} or an error dict; the caller
    is responsible for logging the new user in.
    """
    username = (username or '').strip()
    if not username or not password:
        return {"success": False, "error": "Username and password are required."}

    if User.query.filter_by(username=username).first() is not None:
        return {"success": False, "error": "A user with the given username is already registered"}

    try:
        user = User(username=username)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # Lost a race with another registration for the same name.
        db.session.rollback()
        return {"success": False, "error": "A user with the given username is already registered"}
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Database error registering {username}: {str(e)}")
        return {"success": False, "error": "Could not create the account. Please try again."}

    current_app.logger.info(f"Registered user {username} (ID: {user.id})")
    return {"success": True, "user": user, "message": f"Welcome to YelpCamp {user.username}"}


def authenticate(username, password):
    """Returns the User for a correct username/password pair, else None."""
    username = (username or '').strip()
    if not username or not password:
        return None

    user = User.query.filter_by(username=username).first()
    if user is None or not user.check_password(password):
        current_app.logger.info(f"Failed login attempt for '{username}'")
        return None
    return user
