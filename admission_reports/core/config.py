# admission_reports/core/config.py
import os
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [v.strip() for v in (value or "").split(",") if v.strip()]


class HospitalConfig(BaseModel):
    """
    Static branding printed on every report header.
    Passed into each render call; `get_hospital_config()` gives the default.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    banner_url: str = ""
    address: str = ""
    phone: str = ""


class Settings(BaseModel):
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Admission Record Reports")
    API_V1_STR: str = os.getenv("API_V1_STR", "/api")
    SITE_URL: str = os.getenv("SITE_URL", "http://127.0.0.1:8000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS (env takes priority)
    BACKEND_CORS_ORIGINS: List[str] = _split_csv(
        os.getenv(
            "CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173",
        ))

    # ---------- Hospital branding ----------
    HOSPITAL_NAME: str = os.getenv("HOSPITAL_NAME", "")
    HOSPITAL_BANNER_URL: str = os.getenv("HOSPITAL_BANNER_URL", "")
    HOSPITAL_ADDRESS: str = os.getenv("HOSPITAL_ADDRESS", "")
    HOSPITAL_PHONE: str = os.getenv("HOSPITAL_PHONE", "")

    # ---------- Rendering ----------
    CHARTJS_CDN_URL: str = os.getenv(
        "CHARTJS_CDN_URL",
        "https://cdnjs.cloudflare.com/ajax/libs/Chart.js/3.9.1/chart.min.js",
    )
    # "weasyprint" | "xhtml2pdf" | empty (try weasyprint, then xhtml2pdf)
    PDF_RENDERER: Optional[str] = os.getenv("PDF_RENDERER") or None


settings = Settings()


def get_hospital_config() -> HospitalConfig:
    return HospitalConfig(
        name=settings.HOSPITAL_NAME,
        banner_url=settings.HOSPITAL_BANNER_URL,
        address=settings.HOSPITAL_ADDRESS,
        phone=settings.HOSPITAL_PHONE,
    )
