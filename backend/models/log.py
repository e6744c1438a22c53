# backend/models/log.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, func
from database import Base

# Audit entry for account and job events (REGISTER, LOGIN, JOB_CREATE)
class Log(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, index=True)
    ts = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Null when the actor could not be identified, e.g. a login for an unknown email
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    action = Column(String(50), index=True)
    resource = Column(String(50), index=True)  # "users" or "jobs"
    status = Column(String(20), index=True)  # SUCCESS / FAIL
    ip = Column(String(64), nullable=True)
    meta = Column(JSON, nullable=True)
