from fastapi import APIRouter, Response

from foodcoach.infra.pdf_utils import generate_pdf_for_week
from foodcoach.logic.planning.week_plan import build_week_plan
from foodcoach.logic.shopping.list_builder import build_shopping_list
from foodcoach.utilities.validators import WeekPlanRequest

router = APIRouter(prefix="/api/week-plan", tags=["plan"])


@router.post("")
def week_plan(body: WeekPlanRequest):
    days = build_week_plan(body.recipes)
    return {
        "start": days[0].date,
        "end": days[-1].date,
        "days": [d.to_dict() for d in days],
    }


@router.post("/shopping-list")
def shopping_list(body: WeekPlanRequest):
    items = build_shopping_list(build_week_plan(body.recipes))
    return {"count": len(items), "items": items}


@router.post("/pdf")
def week_plan_pdf(body: WeekPlanRequest):
    days = build_week_plan(body.recipes)
    pdf_bytes = generate_pdf_for_week(days)
    headers = {"Content-Disposition": f'attachment; filename="meal_plan_{days[0].date}.pdf"'}
    return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)
