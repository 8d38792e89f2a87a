"""Employee SQLAlchemy model."""

from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


# Largest value the Integer primary key column can hold on every backend
MAX_EMPLOYEE_ID = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeModel(Base):
    """SQLAlchemy model for employees."""
    
    __tablename__ = "employees"
    # SQLite would otherwise hand out the ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}
    
    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    # Employee data
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    
    # Versioning
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<EmployeeModel(id={self.id}, name={self.name})>"
