from pydantic import BaseModel
from typing import Optional


# ============================================================
# Request bodies
# ============================================================
# Fields are optional on purpose: only the presence of a body is checked,
# missing columns are left for the database to reject.
class CompanyCreate(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class CompanyUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


# ============================================================
# Projections
# ============================================================
class CompanySummary(BaseModel):
    code: str
    name: str

    class Config:
        from_attributes = True


class CompanyOut(CompanySummary):
    description: Optional[str] = None


# ============================================================
# Envelopes
# ============================================================
class CompanyListResponse(BaseModel):
    companies: list[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut
