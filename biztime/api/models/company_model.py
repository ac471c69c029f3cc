from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from biztime.api.core.db import Base

class Company(Base):
    __tablename__ = "companies"

    # Client-supplied short code, e.g. "apple"
    code = Column(String, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    description = Column(Text, nullable=True)

    # Relationship: one-to-many (companies → invoices)
    invoices = relationship("Invoice", back_populates="company", passive_deletes="all")
