"""Lab result roll-up for the dashboard.

Counts markers by status, scores the share of normal markers and grades three
marker families (metabolic, nutrient, inflammation) by keyword match on the
marker name.
"""
from typing import Any, Dict, List

from foodcoach.domain.LabMarker import LabMarker
from foodcoach.domain.LabResult import LabResult

METABOLIC_KEYWORDS = ('glucose', 'cholesterol', 'hdl', 'ldl', 'triglyceride', 'a1c', 'hba1c', 'insulin')
NUTRIENT_KEYWORDS = ('iron', 'ferritin', 'b12', 'vitamin d', 'folate', 'magnesium', 'zinc', 'calcium')
INFLAMMATION_KEYWORDS = ('crp', 'hs-crp', 'homocysteine', 'esr')

NO_DATA = "-"


def _matching(markers, keywords) -> List[LabMarker]:
    return [m for m in markers if any(k in m.name.lower() for k in keywords)]


def _metabolic_status(markers: List[LabMarker]) -> str:
    if not markers:
        return NO_DATA
    if all(m.status == 'normal' for m in markers):
        return 'Optimal'
    return 'Action needed'


def _nutrient_status(markers: List[LabMarker]) -> str:
    if not markers:
        return NO_DATA
    if all(m.status == 'normal' for m in markers):
        return 'Optimal'
    if any(m.status == 'low' for m in markers):
        return 'Action needed'
    return 'Good'


def _inflammation_status(markers: List[LabMarker]) -> str:
    if not markers:
        return NO_DATA
    if all(m.status in ('normal', 'low') for m in markers):
        return 'Low'
    return 'Elevated'


def summarize_lab_result(lab: LabResult) -> Dict[str, Any]:
    """Summary structure:
    {
      'total': int, 'normal': int, 'high': int, 'low': int,
      'score_pct': int,                       # 100 * normal / total rounded half up, 0 when empty
      'metabolic_status': str, 'nutrient_status': str, 'inflammation_status': str,
      'critical_markers': [marker dict, ...]  # every marker not in the normal range
    }
    """
    markers = list(lab.markers)
    total = len(markers)
    normal = len(lab.markers_with_status('normal'))
    return {
        'total': total,
        'normal': normal,
        'high': len(lab.markers_with_status('high')),
        'low': len(lab.markers_with_status('low')),
        'score_pct': int(normal * 100 / total + 0.5) if total else 0,
        'metabolic_status': _metabolic_status(_matching(markers, METABOLIC_KEYWORDS)),
        'nutrient_status': _nutrient_status(_matching(markers, NUTRIENT_KEYWORDS)),
        'inflammation_status': _inflammation_status(_matching(markers, INFLAMMATION_KEYWORDS)),
        'critical_markers': [m.to_dict() for m in markers if not m.is_normal],
    }


__all__ = ["summarize_lab_result"]
