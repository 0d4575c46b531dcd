# app/__init__.py

import logging
from flask import Flask, render_template
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from .config import Config, DEV_SECRET_KEY

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()

def create_app(config_class=Config, image_host=None):
    """
    Builds the Flask application.

    The image host is constructed once from the configuration and stored in
    app.extensions['image_host']; tests pass their own to avoid network calls.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Configure logging to show INFO level messages
    app.logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s')
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)

    if app.config['SECRET_KEY'] == DEV_SECRET_KEY:
        app.logger.warning("SECRET_KEY is not set - using the development secret. Do not run this in production.")

    db.init_app(app)
    migrate.init_app(app, db)

    # HTML forms can only send GET/POST; '?_method=PUT' turns a POST into a PUT.
    from .middleware import MethodOverrideMiddleware
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    login_manager.init_app(app)
    login_manager.login_view = 'index.login_form'
    login_manager.login_message = "You need to be logged in to do that"
    login_manager.login_message_category = 'error'

    # --- IMAGE HOST ---
    if image_host is None:
        from .services.image_host import ImageHost
        image_host = ImageHost.from_config(app.config)
    app.extensions['image_host'] = image_host

    # --- REGISTER BLUEPRINTS ---
    from .routes.index import bp as index_bp
    from .routes.campgrounds import bp as campgrounds_bp
    from .routes.comments import bp as comments_bp

    app.register_blueprint(index_bp)
    app.register_blueprint(campgrounds_bp, url_prefix='/campgrounds')
    app.register_blueprint(comments_bp, url_prefix='/campgrounds/<int:campground_id>/comments')

    from .utils import time_ago
    app.add_template_filter(time_ago)

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(413)
    def too_large(error):
        return render_template('errors/413.html'), 413

    with app.app_context():
        from . import models

        @login_manager.user_loader
        def load_user(user_id):
            from .models import User
            return db.session.get(User, int(user_id))

    return app
