import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from foodcoach.domain.DayPlan import WeekPlan
from foodcoach.utilities.constants import MEAL_SLOTS

EMPTY_SLOT = "-"


def generate_pdf_for_week(week_plan: WeekPlan) -> bytes:
    """Render a Day / Breakfast / Lunch / Dinner table for the week plan as PDF bytes."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    cell = styles["BodyText"]
    start = week_plan[0].date if week_plan else ""
    elements = [
        Paragraph(f"Meal Plan - Week of {start}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Breakfast", "Lunch", "Dinner"]]
    for day in week_plan:
        row = [f"{day.day_label} ({day.date})"]
        for slot in MEAL_SLOTS:
            recipe = day.slot(slot)
            # Paragraph wraps long titles and parses markup
            row.append(Paragraph(escape(recipe.title), cell) if recipe else EMPTY_SLOT)
        data.append(row)

    table = Table(data, repeatRows=1, colWidths=[120, 200, 200, 200])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#10b981")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (0, 0), (-1, 0), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 12),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
