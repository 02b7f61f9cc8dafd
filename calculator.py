# calculator.py

from __future__ import annotations
import logging
import math
import re
from typing import List, Optional, Sequence, Union

import schemas
from app.rules.relations import assign_weights

logger = logging.getLogger(__name__)

# --------------------------
# Parsing nilai harta
# --------------------------
# Awalan angka desimal di depan teks, sisanya diabaikan ("1500abc" -> 1500)
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_property_value(raw: Union[str, float, int, None]) -> Optional[float]:
    """
    Ubah input nilai harta (teks dari form atau angka) menjadi float.
    Return None bila kosong, bukan angka, atau tidak berhingga.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _LEADING_NUMBER.match(raw)
        if not match:
            return None
        value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


# --------------------------
# Kalkulasi utama
# --------------------------
def calculate_inheritance(
    total_property_value: Union[str, float, int, None],
    members: Sequence[schemas.FamilyMember],
) -> Optional[List[schemas.InheritanceResult]]:
    """
    Hitung pembagian harta sederhana.

    Return None bila nilai harta tidak valid atau roster kosong; pemanggil
    harus membiarkan hasil sebelumnya apa adanya (bukan mengosongkannya).
    Tidak pernah raise.
    """
    if total_property_value is None or total_property_value == "" or not members:
        logger.debug("Kalkulasi dilewati: nilai harta atau roster kosong")
        return None

    total_value = parse_property_value(total_property_value)
    if total_value is None:
        logger.debug("Kalkulasi dilewati: nilai harta tidak valid (%r)", total_property_value)
        return None

    alive_members = [m for m in members if m.is_alive]
    weights = assign_weights(alive_members)

    total_shares = sum(weights)
    if total_shares == 0:
        return []

    results: List[schemas.InheritanceResult] = []
    for member, weight in zip(alive_members, weights):
        results.append(
            schemas.InheritanceResult(
                member=member,
                share=(weight / total_shares) * total_value,
                percentage=(weight / total_shares) * 100,
            )
        )

    logger.info(
        "Kalkulasi selesai: %d anggota hidup dari %d, total saham %.1f, harta %s",
        len(alive_members), len(members), total_shares, total_value,
    )
    return results
