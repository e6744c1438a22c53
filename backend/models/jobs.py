# backend/models/jobs.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, Table, func
from sqlalchemy.orm import relationship
from database import Base

# Users who have bid on a job. No endpoint reads or writes it yet.
job_bids = Table(
    "job_bids",
    Base.metadata,
    Column("job_id", Integer, ForeignKey("jobs.id"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id"), primary_key=True),
)

# Model Job
# A posting created by an employer. The employer reference is not checked
# against the user's role.
class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    employer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employer = relationship("User", lazy="joined", uselist=False)
    bids = relationship("User", secondary=job_bids, lazy="selectin", order_by="User.id")
