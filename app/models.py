# models.py

from . import db
from datetime import datetime
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
# --------------------------------------------------

# This file defines the structure of the three database tables using Python classes.
# SQLAlchemy will translate these classes into actual database tables.

# --- 1. USER MODEL ---

class User(UserMixin, db.Model):
    """
    User model for authentication.
    Inherits from UserMixin for Flask-Login functionality.
    """
    __tablename__ = 'user'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), index=True, unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def set_password(self, password):
        """Hashes the password and stores the hash."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Checks a plaintext password against the stored hash."""
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username}>'

# --- 2. CAMPGROUND MODEL ---

class Campground(db.Model):
    """
    A listing owned by the user who created it.

    author_username is a denormalised copy taken at creation time so list and
    show pages never need to join the user table.
    """
    __tablename__ = 'campground'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False, index=True)
    price = db.Column(db.Float, nullable=False)
    image = db.Column(db.String(512), nullable=False)
    image_id = db.Column(db.String(256), nullable=False)
    description = db.Column(db.Text)
    author_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    author_username = db.Column(db.String(64), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Comments in the order they were posted; removing a campground removes its comments.
    comments = db.relationship(
        'Comment',
        backref='campground',
        lazy=True,
        order_by='Comment.id',
        cascade='all, delete-orphan'
    )

    @property
    def author(self):
        return {'id': self.author_id, 'username': self.author_username}

    def to_dict(self):
        """Converts the campground to a dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'image': self.image,
            'image_id': self.image_id,
            'description': self.description,
            'author': self.author,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'comments': [comment.id for comment in self.comments],
        }

    def __repr__(self):
        return f'<Campground {self.id} {self.name!r}>'

# --- 3. COMMENT MODEL ---

class Comment(db.Model):
    __tablename__ = 'comment'

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    campground_id = db.Column(db.Integer, db.ForeignKey('campground.id'), nullable=False, index=True)
    author_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    author_username = db.Column(db.String(64), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    @property
    def author(self):
        return {'id': self.author_id, 'username': self.author_username}

    def to_dict(self):
        """Converts the comment to a dictionary."""
        return {
            'id': self.id,
            'text': self.text,
            'campground_id': self.campground_id,
            'author': self.author,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
