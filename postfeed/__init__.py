import logging

from flask import Flask
from flask_jwt_extended import JWTManager

from postfeed.config import Config
from postfeed.db import db
from postfeed.extensions.extensions import ma
from postfeed.repositories import secret_question_repository
from postfeed.routes.auth_routes import auth_bp
from postfeed.routes.content_routes import content_bp
from postfeed.routes.post_routes import post_bp
from postfeed.routes.secret_question_routes import secret_question_bp


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    db.init_app(app)
    ma.init_app(app)
    JWTManager(app)

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(post_bp, url_prefix="/api")
    app.register_blueprint(secret_question_bp, url_prefix="/api")
    app.register_blueprint(content_bp, url_prefix="/Content")

    with app.app_context():
        db.create_all()
        secret_question_repository.seed_questions(app.config["SECRET_QUESTIONS"])

    return app
