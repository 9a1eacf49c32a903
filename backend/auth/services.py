# backend/auth/services.py

import logging

from flask import current_app
from sqlalchemy.exc import IntegrityError

from auth.passwords import hash_password, verify_password
from auth.tokens import issue_token
from errors import ErrorKind
from models.user_model import User
from models import db


logger = logging.getLogger(__name__)


def find_user_by_email(email):
    return User.query.filter_by(email=email).first()


def create_user(name, email, password_hash):
    user = User(name=name, email=email, password=password_hash)

    db.session.add(user)
    db.session.commit()

    return user


def sign_up(data):

    if find_user_by_email(data.email):
        logger.info("Sign-up rejected, email already registered")
        return None, ErrorKind.CONFLICT

    hashed = hash_password(data.password, current_app.config["BCRYPT_LOG_ROUNDS"])

    try:
        user = create_user(data.name, data.email, hashed)
    except IntegrityError:
        # lost the race against a concurrent sign-up for the same email
        db.session.rollback()
        logger.info("Sign-up rejected by unique constraint on email")
        return None, ErrorKind.CONFLICT

    return user, None


def sign_in(data):

    user = find_user_by_email(data.email)

    if not user or not verify_password(data.password, user.password):
        logger.info("Sign-in failed for unknown email or wrong password")
        return None, ErrorKind.AUTHENTICATION

    return issue_token(user.id), None
