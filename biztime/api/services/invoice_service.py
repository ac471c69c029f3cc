import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from biztime.api.models.company_model import Company
from biztime.api.models.invoice_model import Invoice
from biztime.api.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate
from biztime.api.services import company_service

logger = logging.getLogger(__name__)


class InvoiceService:
    """
    Thin data-access layer for invoices.

    Each method is a single statement against the store, except
    get_invoice_with_company which also looks up the owning company.
    """

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session) -> List[Invoice]:
        return db.query(Invoice).all()

    # ------------------------------------------------------------
    # Fetch single invoice by ID
    # ------------------------------------------------------------
    def get_invoice(self, db: Session, invoice_id: int) -> Optional[Invoice]:
        return db.query(Invoice).filter(Invoice.id == invoice_id).first()

    # ------------------------------------------------------------
    # Fetch invoice + owning company (two lookups, no transaction)
    # ------------------------------------------------------------
    def get_invoice_with_company(
        self,
        db: Session,
        invoice_id: int,
    ) -> tuple[Optional[Invoice], Optional[Company]]:
        invoice = self.get_invoice(db, invoice_id)
        if invoice is None:
            return None, None

        company = company_service.get_company(db, invoice.comp_code)
        if company is None:
            logger.warning(
                "Invoice %s references missing company %r", invoice.id, invoice.comp_code
            )
        return invoice, company

    # ------------------------------------------------------------
    # Create (paid, add_date, paid_date come from column defaults)
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: InvoiceCreate) -> Invoice:
        invoice = Invoice(comp_code=payload.comp_code, amt=payload.amt)
        db.add(invoice)
        db.commit()
        db.refresh(invoice)
        return invoice

    # ------------------------------------------------------------
    # Update amount only
    # ------------------------------------------------------------
    def update_invoice(
        self,
        db: Session,
        invoice_id: int,
        payload: InvoiceUpdate,
    ) -> Optional[Invoice]:
        invoice = self.get_invoice(db, invoice_id)
        if not invoice:
            return None

        invoice.amt = payload.amt

        db.commit()
        db.refresh(invoice)
        return invoice

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> bool:
        invoice = self.get_invoice(db, invoice_id)
        if not invoice:
            return False

        db.delete(invoice)
        db.commit()
        return True


invoice_service = InvoiceService()
