import logging

from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from models import db
from auth.routes import auth_bp
from auth.tokens import register_token_handlers
from events.routes import events_bp
from errors import register_error_handlers
from config import Config


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    CORS(app)

    db.init_app(app)
    with app.app_context():
        db.create_all()

    jwt = JWTManager(app)
    register_token_handlers(jwt)
    register_error_handlers(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(events_bp)

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
