# FILE: admission_reports/api/router.py
from fastapi import APIRouter

from admission_reports.api import routes_reports

api_router = APIRouter()

api_router.include_router(routes_reports.router)
