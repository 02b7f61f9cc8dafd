# Di dalam file: crud.py

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

import models
import schemas
from calculator import calculate_inheritance

logger = logging.getLogger(__name__)

# --------------------------
# Roster (sesi form)
# --------------------------
def create_roster(db: Session) -> models.Roster:
    db_roster = models.Roster(property_value=None, current_step=1)
    db.add(db_roster)
    db.commit()
    db.refresh(db_roster)
    return db_roster

def get_roster(db: Session, roster_id: int) -> Optional[models.Roster]:
    return db.query(models.Roster).filter(models.Roster.id == roster_id).first()

def set_property_value(db: Session, roster: models.Roster, property_value: Optional[str]) -> models.Roster:
    """Simpan teks nilai harta apa adanya; parsing baru dilakukan saat kalkulasi."""
    roster.property_value = property_value
    db.commit()
    db.refresh(roster)
    return roster

# --------------------------
# Anggota keluarga
# --------------------------
def get_members(db: Session, roster: models.Roster) -> List[schemas.FamilyMember]:
    """
    Snapshot roster terbaru, urut sesuai urutan penambahan.
    """
    rows = (
        db.query(models.FamilyMember)
        .filter(models.FamilyMember.roster_id == roster.id)
        .order_by(models.FamilyMember.id)
        .all()
    )
    return [schemas.FamilyMember.model_validate(row) for row in rows]

def _get_member(db: Session, roster: models.Roster, member_id: int) -> Optional[models.FamilyMember]:
    return (
        db.query(models.FamilyMember)
        .filter(models.FamilyMember.roster_id == roster.id, models.FamilyMember.id == member_id)
        .first()
    )

def add_member(db: Session, roster: models.Roster) -> List[schemas.FamilyMember]:
    """
    Tambah anggota kosong: nama "", relation & gender belum diisi, masih hidup.
    """
    db_member = models.FamilyMember(
        roster_id=roster.id, name="", relation=None, gender=None, is_alive=True
    )
    db.add(db_member)
    db.commit()
    logger.debug("Roster %s: anggota %s ditambahkan", roster.id, db_member.id)
    return get_members(db, roster)

def remove_member(db: Session, roster: models.Roster, member_id: int) -> List[schemas.FamilyMember]:
    # id yang tidak ada bukan error, cukup tidak melakukan apa-apa
    db_member = _get_member(db, roster, member_id)
    if db_member is not None:
        db.delete(db_member)
        db.commit()
        logger.debug("Roster %s: anggota %s dihapus", roster.id, member_id)
    return get_members(db, roster)

def update_member(db: Session, roster: models.Roster, member_id: int, update: schemas.MemberUpdate) -> List[schemas.FamilyMember]:
    """Ganti satu field anggota; id tidak ditemukan = no-op."""
    db_member = _get_member(db, roster, member_id)
    if db_member is not None:
        setattr(db_member, update.field, update.value)
        db.commit()
    return get_members(db, roster)

# --------------------------
# Hasil kalkulasi
# --------------------------
def get_results(db: Session, roster: models.Roster) -> List[schemas.InheritanceResult]:
    rows = (
        db.query(models.InheritanceShare)
        .filter(models.InheritanceShare.roster_id == roster.id)
        .order_by(models.InheritanceShare.position)
        .all()
    )
    return [
        schemas.InheritanceResult(
            member=schemas.FamilyMember(
                id=row.member_id,
                name=row.name,
                relation=row.relation,
                gender=row.gender,
                is_alive=row.is_alive,
            ),
            share=row.share,
            percentage=row.percentage,
        )
        for row in rows
    ]

def run_calculation(db: Session, roster: models.Roster) -> bool:
    """
    Jalankan kalkulasi untuk roster.
    - Input tidak valid: hasil lama & step tidak disentuh, return False.
    - Berhasil: hasil lama dibuang seluruhnya, diganti hasil baru, step = 3.
    """
    members = get_members(db, roster)
    results = calculate_inheritance(roster.property_value, members)
    if results is None:
        return False

    db.query(models.InheritanceShare).filter(
        models.InheritanceShare.roster_id == roster.id
    ).delete(synchronize_session=False)

    for position, result in enumerate(results):
        db.add(
            models.InheritanceShare(
                roster_id=roster.id,
                position=position,
                member_id=result.member.id,
                name=result.member.name,
                relation=result.member.relation,
                gender=result.member.gender,
                is_alive=result.member.is_alive,
                share=result.share,
                percentage=result.percentage,
            )
        )
    roster.current_step = 3
    db.commit()
    db.refresh(roster)
    return True
