"""Customer router - FastAPI endpoints for the master data table"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import (
    ALL_ORTE,
    CustomerCountResponse,
    CustomerQueryParams,
    CustomerQueryResult,
    FilterOptions,
    SortDirection,
    SortField,
)
from .service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["Customers"])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Dependency injection for CustomerService"""
    return CustomerService(db)


@router.get("", response_model=CustomerQueryResult, response_model_by_alias=True)
async def get_customers(
    search: str = "",
    ort: str = ALL_ORTE,
    sort_field: SortField = SortField.NACHNAME,
    sort_direction: SortDirection = SortDirection.ASC,
    page: int = Query(1, ge=1),
    service: CustomerService = Depends(get_customer_service),
):
    """One page of customers plus the locality filter options"""
    params = CustomerQueryParams(
        search=search,
        filter_ort=ort,
        sort_field=sort_field,
        sort_direction=sort_direction,
        page=page,
    )
    return service.get_customers(params)


@router.get("/count", response_model=CustomerCountResponse)
async def get_customer_count(service: CustomerService = Depends(get_customer_service)):
    return CustomerCountResponse(count=service.get_customer_count())


@router.get("/filter-options", response_model=FilterOptions)
async def get_filter_options(service: CustomerService = Depends(get_customer_service)):
    return service.get_filter_options()
