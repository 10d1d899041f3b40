# storefront/api/routers/reports.py
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import (
    CustomerOut,
    PopularProductOut,
    ProfitOut,
    RevenueByDateOut,
    SellerSalesOut,
)
from storefront.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/most-popular-product", response_model=PopularProductOut)
def most_popular_product(db: Session = Depends(get_db)):
    return ReportService(db).most_popular_product()


@router.get("/revenue-by-date", response_model=List[RevenueByDateOut])
def revenue_by_date(
    start: date | None = Query(None),
    end: date | None = Query(None),
    db: Session = Depends(get_db),
):
    return ReportService(db).revenue_by_date(start, end)


@router.get("/customers-without-payments", response_model=List[CustomerOut])
def customers_without_payments(db: Session = Depends(get_db)):
    return ReportService(db).customers_without_payments()


@router.get("/platform-profit", response_model=ProfitOut)
def platform_profit(db: Session = Depends(get_db)):
    return {"profit": ReportService(db).platform_profit()}


@router.get("/seller-sales", response_model=List[SellerSalesOut])
def seller_sales(db: Session = Depends(get_db)):
    return ReportService(db).seller_sales()
