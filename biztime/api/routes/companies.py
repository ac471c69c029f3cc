from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db
from biztime.api.core.errors import BadRequestError, NotFoundError
from biztime.api.schemas.common_schema import DeletedResponse
from biztime.api.schemas.company_schema import (
    CompanyCreate,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from biztime.api.services.company_service import (
    create_company,
    delete_company,
    get_company,
    list_companies,
    update_company,
)

router = APIRouter()


@router.get("", response_model=CompanyListResponse)
def list_companies_route(db: Session = Depends(get_db)):
    """{companies: [{code, name}, ...]}"""
    return {"companies": list_companies(db)}


@router.get("/{code}", response_model=CompanyResponse)
def get_company_route(code: str, db: Session = Depends(get_db)):
    company = get_company(db, code)
    if company is None:
        raise NotFoundError(f"No company with code '{code}'")
    return {"company": company}


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company_route(
    payload: Optional[CompanyCreate] = Body(None),
    db: Session = Depends(get_db),
):
    """
    Takes {code, name, description}, returns {company: {code, name, description}}.

    Only the presence of a body is checked; a missing code or name is
    rejected by the database.
    """
    if payload is None:
        raise BadRequestError("Request body is required")
    return {"company": create_company(db, payload)}


@router.put("/{code}", response_model=CompanyResponse)
def update_company_route(
    code: str,
    payload: Optional[CompanyUpdate] = Body(None),
    db: Session = Depends(get_db),
):
    """Takes {name, description}; both columns are replaced."""
    if payload is None:
        raise BadRequestError("Request body is required")

    company = update_company(db, code, payload)
    if company is None:
        raise NotFoundError(f"No company with code '{code}'")
    return {"company": company}


@router.delete("/{code}", response_model=DeletedResponse)
def delete_company_route(code: str, db: Session = Depends(get_db)):
    if not delete_company(db, code):
        raise NotFoundError(f"No company with code '{code}'")
    return DeletedResponse()
