from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    false,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from biztime.api.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # No ON DELETE CASCADE: a company with invoices can't be deleted
    comp_code = Column(String, ForeignKey("companies.code"), nullable=False)

    amt = Column(Numeric(10, 2), nullable=False)

    # --- Payment state (never written by the API) ---
    paid = Column(Boolean, nullable=False, server_default=false())
    add_date = Column(DateTime, nullable=False, server_default=func.now())
    paid_date = Column(DateTime, nullable=True)

    # Relationship back to the company
    company = relationship("Company", back_populates="invoices")
