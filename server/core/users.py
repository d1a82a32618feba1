# server/core/users.py

from sqlalchemy.orm import Session
from models.user import User


def find_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password: str) -> User:
    """
    Stores a new user exactly as given. Duplicate usernames are left to
    the table's unique constraint.
    """
    new_user = User(username=username, password=password)
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    return new_user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()
