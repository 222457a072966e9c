"""
Job model - a position posted by a company.
"""
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobly.models.base import BaseModel

if TYPE_CHECKING:
    from jobly.models.company import Company


class Job(BaseModel):
    """
    Job posting entity.

    ``equity`` is the fraction of the company offered, between 0 and 1.
    """

    __tablename__ = "jobs"

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    equity: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    company_handle: Mapped[str] = mapped_column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    company: Mapped["Company"] = relationship("Company", back_populates="jobs")

    def __repr__(self) -> str:
        return f"<Job {self.id} {self.title} at {self.company_handle}>"
