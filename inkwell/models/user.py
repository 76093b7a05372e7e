"""ORM model for application users (credential store)."""

import uuid

from sqlalchemy import Column, DateTime, String, Uuid

from inkwell.core.security import hash_password, verify_password
from inkwell.models.base import Base, utcnow


class User(Base):
    """
    User account for JWT authentication.

    Only the bcrypt hash is stored. Assigning ``user.password`` hashes the new
    plaintext immediately; the plaintext is never kept on the instance and the
    attribute cannot be read back. Email is stored lowercased so the unique
    index compares case-insensitively.
    """

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(30), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    @property
    def password(self) -> str:
        raise AttributeError("password is write-only")

    @password.setter
    def password(self, plain_password: str) -> None:
        self.password_hash = hash_password(plain_password)

    def check_password(self, plain_password: str) -> bool:
        """True if plain_password matches the stored hash; never raises on mismatch."""
        if not self.password_hash:
            return False
        return verify_password(plain_password, self.password_hash)

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
