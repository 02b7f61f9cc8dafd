# Di dalam file: main.py

import logging
from typing import List

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

import crud
import models
import schemas
from app.display.presenter import present_results, summarize
from app.rules.relations import relation_options
from calculator import calculate_inheritance
from config import settings
from database import SessionLocal, engine, session_lock

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Membuat tabel sesi (in-memory secara default)
models.Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Dependency untuk Sesi Database ---
def get_db():
    # Satu request memegang sesi sampai selesai, request lain menunggu giliran
    with session_lock:
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()
# -----------------------------------------

def _roster_or_404(db: Session, roster_id: int) -> models.Roster:
    roster = crud.get_roster(db, roster_id)
    if roster is None:
        raise HTTPException(status_code=404, detail="Roster tidak ditemukan")
    return roster

def _roster_state(db: Session, roster: models.Roster) -> schemas.RosterState:
    results = crud.get_results(db, roster)
    return schemas.RosterState(
        id=roster.id,
        property_value=roster.property_value,
        current_step=roster.current_step,
        members=crud.get_members(db, roster),
        results=present_results(results),
        summary=summarize(roster.property_value, results),
    )

@app.get("/")
def read_root():
    """
    Endpoint utama untuk menyapa pengguna.
    """
    return {"message": "Selamat datang di Hindu Inheritance Calculator"}

@app.get("/relations/", response_model=List[schemas.RelationOption])
def read_relations():
    return [schemas.RelationOption(value=value, label=label) for value, label in relation_options()]

@app.post("/calculate", response_model=schemas.CalculationResult)
def api_calculate(payload: schemas.CalculationInput):
    """
    Kalkulasi langsung tanpa roster tersimpan.
    calculated=False berarti input tidak valid dan hasil sebelumnya tetap dipakai.
    """
    results = calculate_inheritance(payload.property_value, payload.members)
    if results is None:
        return schemas.CalculationResult(
            calculated=False,
            results=[],
            summary=summarize(payload.property_value, []),
        )
    return schemas.CalculationResult(
        calculated=True,
        results=present_results(results),
        summary=summarize(payload.property_value, results),
    )

# --- Endpoint Roster (sesi form) ---
@app.post("/rosters/", response_model=schemas.RosterState, status_code=201)
def create_roster_endpoint(db: Session = Depends(get_db)):
    roster = crud.create_roster(db)
    logger.info("Roster %s dibuat", roster.id)
    return _roster_state(db, roster)

@app.get("/rosters/{roster_id}", response_model=schemas.RosterState)
def read_roster(roster_id: int, db: Session = Depends(get_db)):
    return _roster_state(db, _roster_or_404(db, roster_id))

@app.put("/rosters/{roster_id}/property-value", response_model=schemas.RosterState)
def update_property_value(roster_id: int, payload: schemas.PropertyValueInput, db: Session = Depends(get_db)):
    roster = _roster_or_404(db, roster_id)
    crud.set_property_value(db, roster, payload.property_value)
    return _roster_state(db, roster)

@app.post("/rosters/{roster_id}/members/", response_model=List[schemas.FamilyMember])
def add_member_endpoint(roster_id: int, db: Session = Depends(get_db)):
    return crud.add_member(db, _roster_or_404(db, roster_id))

@app.patch("/rosters/{roster_id}/members/{member_id}", response_model=List[schemas.FamilyMember])
def update_member_endpoint(roster_id: int, member_id: int, payload: schemas.MemberUpdate, db: Session = Depends(get_db)):
    return crud.update_member(db, _roster_or_404(db, roster_id), member_id, payload)

@app.delete("/rosters/{roster_id}/members/{member_id}", response_model=List[schemas.FamilyMember])
def remove_member_endpoint(roster_id: int, member_id: int, db: Session = Depends(get_db)):
    return crud.remove_member(db, _roster_or_404(db, roster_id), member_id)

@app.post("/rosters/{roster_id}/calculate", response_model=schemas.RosterState)
def run_calculation(roster_id: int, db: Session = Depends(get_db)):
    """
    Endpoint utama untuk menjalankan perhitungan pada roster tersimpan.
    """
    roster = _roster_or_404(db, roster_id)
    if not crud.run_calculation(db, roster):
        logger.info("Roster %s: input belum lengkap, hasil lama dipertahankan", roster.id)
    return _roster_state(db, roster)

@app.get("/rosters/{roster_id}/results", response_model=schemas.CalculationResult)
def read_results(roster_id: int, db: Session = Depends(get_db)):
    roster = _roster_or_404(db, roster_id)
    results = crud.get_results(db, roster)
    return schemas.CalculationResult(
        calculated=roster.current_step == 3,
        results=present_results(results),
        summary=summarize(roster.property_value, results),
    )
