# app/display/presenter.py

from typing import List, Optional, Sequence, Union

import schemas
from calculator import parse_property_value
from app.display.currency import format_inr, format_percentage, member_label


def present_results(results: Sequence[schemas.InheritanceResult]) -> List[schemas.DisplayedResult]:
    displayed = []
    for index, result in enumerate(results):
        displayed.append(
            schemas.DisplayedResult(
                member=result.member,
                share=result.share,
                percentage=result.percentage,
                label=member_label(result.member.name, index),
                share_display=format_inr(result.share, max_fraction_digits=0),
                percentage_display=format_percentage(result.percentage),
            )
        )
    return displayed


def summarize(
    property_value: Union[str, float, None],
    results: Sequence[schemas.InheritanceResult],
) -> schemas.CalculationSummary:
    """Ringkasan: total harta (maks. 3 digit desimal) dan jumlah penerima."""
    total: Optional[float] = parse_property_value(property_value)
    return schemas.CalculationSummary(
        total_property_value=total,
        total_property_display=format_inr(total, max_fraction_digits=3) if total is not None else None,
        total_beneficiaries=len(results),
    )
