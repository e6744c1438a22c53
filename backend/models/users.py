# backend/models/users.py
from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint, func
from database import Base

# Represents a marketplace account with credentials and a role tag
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(
        String,
        CheckConstraint("role IN ('freelancer', 'employer')"),
        nullable=False,
        default="freelancer",
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
