# config.py

import os
from dotenv import load_dotenv

# Get the base directory of the application
basedir = os.path.abspath(os.path.dirname(__file__))

# This line finds the .env file in your root directory and loads it.
load_dotenv(os.path.join(basedir, '..', '.env'))
# --------------------------------------

DEV_SECRET_KEY = 'dev-change-me'


class Config:
    """
    Contains all the configuration variables for the application,
    including database settings and image hosting credentials.
    """
    # --- Database Settings ---
    # Reads the database URL from the .env file.
    # Provides a default (SQLite) if the variable isn't set.
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'yelpcamp.db')

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- Secret Key ---
    # Signs the session cookie. create_app warns when the dev value is in use.
    SECRET_KEY = os.environ.get('SECRET_KEY') or DEV_SECRET_KEY

    # --- Image Hosting (Cloudinary) ---
    CLOUDINARY_CLOUD_NAME = os.environ.get('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.environ.get('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.environ.get('CLOUDINARY_API_SECRET')
    CLOUDINARY_FOLDER = os.environ.get('CLOUDINARY_FOLDER') or 'yelpcamp'

    # --- Uploads ---
    ALLOWED_IMAGE_EXTENSIONS = {'jpg', 'jpeg', 'png', 'gif'}
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH') or 16 * 1024 * 1024)

    # --- Server binding (used by run.py) ---
    IP = os.environ.get('IP') or '0.0.0.0'
    PORT = int(os.environ.get('PORT') or 5000)


class TestConfig(Config):
    """Configuration used by the test suite."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'test-secret'
    CLOUDINARY_CLOUD_NAME = 'test-cloud'
    CLOUDINARY_API_KEY = 'test-key'
    CLOUDINARY_API_SECRET = 'test-secret'
