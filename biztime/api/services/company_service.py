from typing import Optional

from sqlalchemy.orm import Session

from biztime.api.models.company_model import Company
from biztime.api.schemas.company_schema import CompanyCreate, CompanyUpdate


def list_companies(db: Session):
    return db.query(Company).all()


def get_company(db: Session, code: str) -> Optional[Company]:
    return db.query(Company).filter(Company.code == code).first()


def create_company(db: Session, payload: CompanyCreate) -> Company:
    company = Company(
        code=payload.code,
        name=payload.name,
        description=payload.description,
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def update_company(db: Session, code: str, payload: CompanyUpdate) -> Optional[Company]:
    company = get_company(db, code)
    if company is None:
        return None

    # Both columns are overwritten, absent keys included
    company.name = payload.name
    company.description = payload.description

    db.commit()
    db.refresh(company)
    return company


def delete_company(db: Session, code: str) -> bool:
    company = get_company(db, code)
    if company is None:
        return False

    db.delete(company)
    db.commit()
    return True
