# scoutcookies/services/scout_service.py
from flask import current_app
from flask_jwt_extended import create_access_token
from werkzeug.security import generate_password_hash, check_password_hash

from ..extensions import db
from ..model import Scout, normalize_email

DEMO_SCOUT = {"email": "scout@demo.com", "password": "password123", "name": "Demo Scout"}


def authenticate(email, password):
    """Scout for the credentials, or None. Callers must not say which part was wrong."""
    scout = Scout.query.filter_by(email=normalize_email(email)).first()
    if not scout or not check_password_hash(scout.password_hash, password or ""):
        return None
    return scout


def issue_token(scout: Scout) -> str:
    return create_access_token(
        identity=str(scout.id),
        additional_claims={"email": scout.email, "name": scout.name},
    )


def create_scout(email, password, name) -> Scout:
    email = normalize_email(email)
    name = (name or "").strip()
    if not email or not password or not name:
        raise ValueError("email, password and name are required")
    if Scout.query.filter_by(email=email).first():
        raise ValueError("Email already registered")

    scout = Scout(email=email, password_hash=generate_password_hash(password), name=name)
    db.session.add(scout)
    db.session.commit()
    return scout


def ensure_demo_scout():
    if db.session.query(Scout.id).count() > 0:
        return None
    scout = create_scout(**DEMO_SCOUT)
    current_app.logger.info("Seeded demo scout %s", scout.email)
    return scout
