"""
Seed the reference criteria set (C1-C13) into an empty criteria table.

Usage (from backend/ with DATABASE_URL set):
  python -m appraisal.scripts.seed_criteria
"""
from __future__ import annotations

from typing import Dict, List

from appraisal.platform.database import Base, SessionLocal, engine
from appraisal.models.criterion import Criterion, CriterionType

REFERENCE_CRITERIA: List[Dict] = [
    # Kinerja Inti
    {"name": "Kualitas Kerja", "category": "Kinerja Inti", "type": CriterionType.BENEFIT, "weight": 20.0, "scale": "1-5"},
    {"name": "Tanggung Jawab", "category": "Kinerja Inti", "type": CriterionType.BENEFIT, "weight": 20.0, "scale": "1-5"},
    {"name": "Kuantitas Kerja", "category": "Kinerja Inti", "type": CriterionType.BENEFIT, "weight": 15.0, "scale": "1-5"},
    {"name": "Pemahaman Tugas", "category": "Kinerja Inti", "type": CriterionType.BENEFIT, "weight": 15.0, "scale": "1-5"},
    {"name": "Inisiatif", "category": "Kinerja Inti", "type": CriterionType.BENEFIT, "weight": 15.0, "scale": "1-5"},
    {"name": "Kerjasama", "category": "Kinerja Inti", "type": CriterionType.BENEFIT, "weight": 15.0, "scale": "1-5"},
    # Kedisiplinan
    {"name": "Jumlah Hari Alpa", "category": "Kedisiplinan", "type": CriterionType.COST, "weight": 30.0, "scale": "0-31 hari"},
    {"name": "Jumlah Keterlambatan", "category": "Kedisiplinan", "type": CriterionType.COST, "weight": 20.0, "scale": "0-31 kali"},
    {"name": "Jumlah Hari Izin", "category": "Kedisiplinan", "type": CriterionType.COST, "weight": 15.0, "scale": "0-31 hari"},
    {"name": "Jumlah Hari Sakit", "category": "Kedisiplinan", "type": CriterionType.COST, "weight": 15.0, "scale": "0-31 hari"},
    {"name": "Pulang Cepat", "category": "Kedisiplinan", "type": CriterionType.COST, "weight": 20.0, "scale": "0-31 kali"},
    # Faktor Tambahan
    {"name": "Prestasi", "category": "Faktor Tambahan", "type": CriterionType.BENEFIT, "weight": 50.0, "scale": "0/1"},
    {"name": "Surat Peringatan", "category": "Faktor Tambahan", "type": CriterionType.COST, "weight": 50.0, "scale": "0/1"},
]


def seed() -> int:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Criterion).first():
            print("Criteria already present. Skipping.")
            return 0
        for attrs in REFERENCE_CRITERIA:
            db.add(Criterion(**attrs))
        db.commit()
        print(f"Seeded {len(REFERENCE_CRITERIA)} criteria.")
        return len(REFERENCE_CRITERIA)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
