import logging
from typing import List, Optional

from sqlmodel import Session, select

from ..errors import DuplicateEmail, NotFound
from ..models import User
from ..schemas import UserCreate, UserUpdate
from ..security import get_password_hash, verify_password
from ..utils.sqlmodel_helpers import apply_partial_update, commit_or_conflict


logger = logging.getLogger(__name__)


def _email_taken(session: Session, email: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(User).where(User.email == email)
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    return session.exec(stmt).first() is not None


def create_user(session: Session, payload: UserCreate) -> User:
    email = payload.email.strip()
    if _email_taken(session, email):
        raise DuplicateEmail()

    user = User(
        email=email,
        hashed_password=get_password_hash(payload.password),
        full_name=payload.full_name,
        role=payload.role,
        avatar_url=payload.avatar_url,
        is_active=True,
    )
    commit_or_conflict(session, user, DuplicateEmail)
    logger.info("Created %s user %s", user.role.value, user.id)
    return user


def authenticate_user(session: Session, email: str, password: str) -> Optional[User]:
    """Return the active user owning these credentials, or ``None``.

    Email matching is exact; no case folding is applied.
    """
    user = session.exec(select(User).where(User.email == email)).first()
    if not user or not user.is_active:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def get_users(session: Session) -> List[User]:
    return session.exec(select(User).order_by(User.id)).all()


def get_user_by_id(session: Session, user_id: int) -> Optional[User]:
    return session.get(User, user_id)


def update_user(session: Session, user_id: int, payload: UserUpdate) -> User:
    user = session.get(User, user_id)
    if not user:
        raise NotFound("User", user_id)

    data = payload.model_dump(exclude_unset=True)
    if "email" in data:
        data["email"] = data["email"].strip()
        if _email_taken(session, data["email"], exclude_id=user.id):
            raise DuplicateEmail()

    apply_partial_update(user, data)
    commit_or_conflict(session, user, DuplicateEmail)
    logger.info("Updated user %s fields=%s", user.id, sorted(data))
    return user
