from pydantic_settings import BaseSettings
from typing import List, Optional


# C1-C6 core performance (Benefit), C7-C11 discipline (Cost), C12-C13 additional factors.
DEFAULT_CANONICAL_CRITERIA_ORDER: List[str] = [
    "Kualitas Kerja",
    "Tanggung Jawab",
    "Kuantitas Kerja",
    "Pemahaman Tugas",
    "Inisiatif",
    "Kerjasama",
    "Jumlah Hari Alpa",
    "Jumlah Keterlambatan",
    "Jumlah Hari Izin",
    "Jumlah Hari Sakit",
    "Pulang Cepat",
    "Prestasi",
    "Surat Peringatan",
]


class Settings(BaseSettings):
    # Deployment environment
    DEPLOYMENT_ENV: str = "development"

    # Database
    DATABASE_URL: str = "sqlite:///./appraisal.db"

    # Reference ordering used for criterion codes (C1..Cn) and display order.
    # Override with a JSON list, e.g. CANONICAL_CRITERIA_ORDER='["A", "B"]'.
    CANONICAL_CRITERIA_ORDER: List[str] = list(DEFAULT_CANONICAL_CRITERIA_ORDER)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # URLs
    FRONTEND_URL: str = "http://localhost:5173"
    # Optional comma-separated extra CORS origins
    CORS_EXTRA_ORIGINS: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return (self.DEPLOYMENT_ENV or "").strip().lower() == "production"

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }


settings = Settings()
