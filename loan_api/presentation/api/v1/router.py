from fastapi import APIRouter

from .health import health_router
from .loans import loan_router
from .loan_types import loan_type_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(loan_router, tags=["Loans"])
v1_router.include_router(loan_type_router, tags=["Loan Types"])

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(v1_router)
