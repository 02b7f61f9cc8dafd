# app/rules/relations.py

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from schemas import FamilyMember


class Relation(str, Enum):
    SON = "son"
    DAUGHTER = "daughter"
    WIDOW = "widow"
    MOTHER = "mother"
    FATHER = "father"
    BROTHER = "brother"
    SISTER = "sister"


# Label yang ditampilkan di pilihan "Select relation"
RELATION_LABELS: Dict[Relation, str] = {
    Relation.SON: "Son",
    Relation.DAUGHTER: "Daughter",
    Relation.WIDOW: "Widow",
    Relation.MOTHER: "Mother",
    Relation.FATHER: "Father",
    Relation.BROTHER: "Brother",
    Relation.SISTER: "Sister",
}

# =========================
# Bobot bagian per golongan
# =========================
CLASS_I_WEIGHT = 1.0      # son, daughter, credited widow
OTHER_WEIGHT = 0.5        # mother, father, brother, sister, kosong, tidak dikenal


def relation_options() -> List[Tuple[str, str]]:
    return [(r.value, RELATION_LABELS[r]) for r in Relation]


def _relation_of(member: FamilyMember) -> str:
    return member.relation or ""


def assign_weights(alive: Sequence[FamilyMember]) -> List[float]:
    """
    Bobot per anggota, sejajar dengan urutan `alive`. Dihitung per posisi,
    bukan per id, sehingga anggota dengan id sama tetap dihitung masing-masing.
    Widow tambahan berbobot 0.
    """
    widow_index = next(
        (i for i, m in enumerate(alive) if _relation_of(m) == Relation.WIDOW.value), None
    )

    weights: List[float] = []
    for index, member in enumerate(alive):
        relation = _relation_of(member)
        if relation in (Relation.SON.value, Relation.DAUGHTER.value):
            weights.append(CLASS_I_WEIGHT)
        elif relation == Relation.WIDOW.value:
            weights.append(CLASS_I_WEIGHT if index == widow_index else 0.0)
        else:
            weights.append(OTHER_WEIGHT)
    return weights
