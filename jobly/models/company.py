"""
Company model - employers that post jobs.
"""
from typing import TYPE_CHECKING, List, Optional
from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobly.models.base import BaseModel

if TYPE_CHECKING:
    from jobly.models.job import Job


class Company(BaseModel):
    """
    Company entity.

    Identified by a short lowercase ``handle`` chosen at creation.
    """

    __tablename__ = "companies"

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
        CheckConstraint("handle = lower(handle)", name="ck_companies_handle_lower"),
    )

    # Fields
    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    num_employees: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    logo_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    jobs: Mapped[List["Job"]] = relationship(
        "Job",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Job.id",
    )

    def __repr__(self) -> str:
        return f"<Company {self.handle}>"
