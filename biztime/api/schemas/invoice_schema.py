from decimal import Decimal
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from biztime.api.schemas.company_schema import CompanyOut


# ============================================================
# Request bodies
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: Optional[str] = None
    amt: Optional[Decimal] = None


# Only the amount is editable; paid / paid_date are left alone
class InvoiceUpdate(BaseModel):
    amt: Optional[Decimal] = None


# ============================================================
# Projections
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str

    class Config:
        from_attributes = True


class InvoiceOut(InvoiceSummary):
    amt: Decimal
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None


class InvoiceDetail(InvoiceOut):
    # None when comp_code no longer points at a company
    company: Optional[CompanyOut] = None


# ============================================================
# Envelopes
# ============================================================
class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
