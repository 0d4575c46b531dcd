"""
Shared pytest fixtures for the YelpCamp test suite.

Every test gets a fresh app bound to an in-memory SQLite database and a
FakeImageHost, so no test touches Cloudinary or a real database.
"""

import io

import pytest

from app import create_app, db
from app.config import TestConfig
from app.models import Campground, User
from app.services.image_host import ImageHostError, UploadedImage


SAMPLE_JPEG = (
    b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
    b'\xff\xd9'
)


class FakeImageHost:
    """
    Records uploads and deletions instead of calling the provider.

    Set fail_upload / fail_destroy to make the next calls raise ImageHostError.
    """

    def __init__(self):
        self.uploads = []
        self.destroyed = []
        self.calls = []
        self.fail_upload = False
        self.fail_destroy = False

    def upload(self, file_storage):
        self.calls.append(('upload', file_storage.filename))
        if self.fail_upload:
            raise ImageHostError("Image upload failed: provider unavailable")
        number = len(self.uploads) + 1
        image = UploadedImage(
            url=f"https://res.cloudinary.test/yelpcamp/{number}.jpg",
            asset_id=f"yelpcamp/{number}"
        )
        self.uploads.append(image)
        return image

    def destroy(self, asset_id):
        self.calls.append(('destroy', asset_id))
        if self.fail_destroy:
            raise ImageHostError("Image deletion failed: provider unavailable")
        self.destroyed.append(asset_id)


@pytest.fixture
def image_host():
    return FakeImageHost()


@pytest.fixture
def app(image_host):
    app = create_app(TestConfig, image_host=image_host)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Creates a user directly in the database and returns its id."""
    def _make_user(username, password='secret'):
        with app.app_context():
            user = User(username=username)
            user.set_password(password)
            db.session.add(user)
            db.session.commit()
            return user.id
    return _make_user


@pytest.fixture
def make_campground(app):
    """Stores a campground owned by the given user and returns its id."""
    def _make_campground(author_id, name='Pine Ridge', price=20.0, image_id='yelpcamp/seed'):
        with app.app_context():
            author = db.session.get(User, author_id)
            campground = Campground(
                name=name,
                price=price,
                image=f"https://res.cloudinary.test/{image_id}.jpg",
                image_id=image_id,
                description='quiet',
                author_id=author.id,
                author_username=author.username
            )
            db.session.add(campground)
            db.session.commit()
            return campground.id
    return _make_campground


def login(client, username, password='secret'):
    return client.post('/login', data={'username': username, 'password': password})


def image_upload(filename='pine.jpg', content=SAMPLE_JPEG):
    return (io.BytesIO(content), filename)


@pytest.fixture
def alice(make_user):
    return make_user('alice')


@pytest.fixture
def bob(make_user):
    return make_user('bob')
