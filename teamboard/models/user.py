"""User model."""

from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship, validates
from teamboard.db.base import Base


class User(Base):
    """Registered user. ``password_hash`` must never leave the server."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    teams = relationship("Team", secondary="team_members", back_populates="members")
    tasks = relationship("Task", back_populates="assignee")

    @validates("email")
    def validate_email(self, key, value):
        value = (value or "").strip().lower()
        if not value:
            raise ValueError("User validation failed: email is required.")
        if "@" not in value:
            raise ValueError(f"User validation failed: '{value}' is not a valid email.")
        return value

    @validates("password_hash")
    def validate_password_hash(self, key, value):
        if not value:
            raise ValueError("User validation failed: passwordHash is required.")
        return value
