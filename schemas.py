# Di dalam file: schemas.py

from pydantic import BaseModel, ConfigDict, model_validator
from typing import List, Literal, Optional, Union

# --- Skema Anggota Keluarga (Roster) ---
class FamilyMemberBase(BaseModel):
    name: str = ""                   # Boleh kosong, ditampilkan sebagai "Member N"
    relation: Optional[str] = None   # son, daughter, widow, mother, father, brother, sister
    gender: Optional[str] = None     # Tidak dipakai dalam perhitungan
    is_alive: bool = True

class FamilyMember(FamilyMemberBase):
    id: int
    model_config = ConfigDict(from_attributes=True)

MemberField = Literal["name", "relation", "gender", "is_alive"]

class MemberUpdate(BaseModel):
    field: MemberField
    value: Union[bool, str, None] = None

    @model_validator(mode="after")
    def _check_value_type(self):
        # Hanya tipe yang dideklarasikan field yang dicek, tidak ada validasi isi
        if self.field == "is_alive" and not isinstance(self.value, bool):
            raise ValueError("is_alive harus bernilai boolean")
        if self.field == "name" and not isinstance(self.value, str):
            raise ValueError("name harus berupa string")
        if self.field in ("relation", "gender") and isinstance(self.value, bool):
            raise ValueError(f"{self.field} harus berupa string atau null")
        return self

# --- Skema Output Kalkulasi ---
class InheritanceResult(BaseModel):
    member: FamilyMember
    share: float        # Bagian dalam rupee
    percentage: float   # 0..100 dari total harta

class DisplayedResult(InheritanceResult):
    label: str               # Nama anggota atau "Member N"
    share_display: str       # Misal "₹4,00,000"
    percentage_display: str  # Misal "40.0"

class CalculationSummary(BaseModel):
    total_property_value: Optional[float] = None
    total_property_display: Optional[str] = None
    total_beneficiaries: int = 0

# --- Skema Input untuk Kalkulasi Langsung (tanpa roster tersimpan) ---
class CalculationInput(BaseModel):
    property_value: Optional[Union[float, str]] = None  # Teks mentah dari form atau angka
    members: List[FamilyMember] = []

class CalculationResult(BaseModel):
    calculated: bool    # False = input tidak valid, hasil sebelumnya tidak diubah
    results: List[DisplayedResult]
    summary: CalculationSummary

# --- Skema Sesi Roster ---
class PropertyValueInput(BaseModel):
    property_value: Optional[str] = None

class RosterState(BaseModel):
    id: int
    property_value: Optional[str] = None
    current_step: int = 1
    members: List[FamilyMember]
    results: List[DisplayedResult]
    summary: CalculationSummary

class RelationOption(BaseModel):
    value: str
    label: str
