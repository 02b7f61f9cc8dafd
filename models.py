# Di dalam file: models.py

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from database import Base

# Satu roster = satu sesi form (nilai harta + daftar anggota + hasil terakhir)
class Roster(Base):
    __tablename__ = "rosters"

    id = Column(Integer, primary_key=True, index=True)
    property_value = Column(String, nullable=True)  # Teks mentah seperti yang diketik
    current_step = Column(Integer, nullable=False, default=1)

    members = relationship(
        "FamilyMember",
        back_populates="roster",
        order_by="FamilyMember.id",
        cascade="all, delete-orphan",
    )

class FamilyMember(Base):
    __tablename__ = "family_members"
    # AUTOINCREMENT: id yang sudah dihapus tidak pernah dipakai ulang
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    roster_id = Column(Integer, ForeignKey("rosters.id"), nullable=False, index=True)
    name = Column(String, nullable=False, default="")
    relation = Column(String, nullable=True)
    gender = Column(String, nullable=True)
    is_alive = Column(Boolean, nullable=False, default=True)

    roster = relationship("Roster", back_populates="members")

# Salinan anggota saat kalkulasi, supaya hasil lama tetap utuh walau roster diedit
class InheritanceShare(Base):
    __tablename__ = "inheritance_results"

    id = Column(Integer, primary_key=True, index=True)
    roster_id = Column(Integer, ForeignKey("rosters.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    member_id = Column(Integer, nullable=False)
    name = Column(String, nullable=False, default="")
    relation = Column(String, nullable=True)
    gender = Column(String, nullable=True)
    is_alive = Column(Boolean, nullable=False, default=True)
    share = Column(Float, nullable=False)
    percentage = Column(Float, nullable=False)
