from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db
from biztime.api.core.errors import BadRequestError, NotFoundError
from biztime.api.models.company_model import Company
from biztime.api.models.invoice_model import Invoice
from biztime.api.schemas.common_schema import DeletedResponse
from biztime.api.schemas.company_schema import CompanyOut
from biztime.api.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetail,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceOut,
    InvoiceResponse,
    InvoiceUpdate,
)
from biztime.api.services.invoice_service import invoice_service

router = APIRouter()


def _not_found(invoice_id: int) -> NotFoundError:
    return NotFoundError(f"No invoice with id {invoice_id}")


def _invoice_to_detail(invoice: Invoice, company: Optional[Company]) -> InvoiceDetail:
    out = InvoiceOut.model_validate(invoice)
    return InvoiceDetail(
        **out.model_dump(),
        company=CompanyOut.model_validate(company) if company is not None else None,
    )


@router.get("", response_model=InvoiceListResponse)
def list_invoices(db: Session = Depends(get_db)):
    """{invoices: [{id, comp_code}, ...]}"""
    return {"invoices": invoice_service.get_all_invoices(db)}


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    """
    {invoice: {id, amt, paid, add_date, paid_date, comp_code,
               company: {code, name, description}}}

    company is null if comp_code no longer matches a company.
    """
    invoice, company = invoice_service.get_invoice_with_company(db, invoice_id)
    if invoice is None:
        raise _not_found(invoice_id)
    return {"invoice": _invoice_to_detail(invoice, company)}


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: Optional[InvoiceCreate] = Body(None),
    db: Session = Depends(get_db),
):
    """Takes {comp_code, amt}. An unknown comp_code fails in the database."""
    if payload is None:
        raise BadRequestError("Request body is required")
    return {"invoice": invoice_service.create_invoice(db, payload)}


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(
    invoice_id: int,
    payload: Optional[InvoiceUpdate] = Body(None),
    db: Session = Depends(get_db),
):
    """Takes {amt}. Payment fields are never changed here."""
    if payload is None:
        raise BadRequestError("Request body is required")

    invoice = invoice_service.update_invoice(db, invoice_id, payload)
    if not invoice:
        raise _not_found(invoice_id)
    return {"invoice": invoice}


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    if not invoice_service.delete_invoice(db, invoice_id):
        raise _not_found(invoice_id)
    return DeletedResponse()
