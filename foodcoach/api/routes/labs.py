import logging

from fastapi import APIRouter, HTTPException

from foodcoach.ai.errors import ConfigurationError
from foodcoach.ai.service import analyze_lab_results, get_personalized_recipes
from foodcoach.domain.LabResult import LabResult
from foodcoach.logic.reporting.lab_summary import summarize_lab_result
from foodcoach.utilities.constants import ANALYZE_FAILED_MESSAGE, RECIPES_FAILED_MESSAGE, SAMPLE_LAB_TEXT
from foodcoach.utilities.validators import AnalyzeRequest

router = APIRouter(prefix="/api", tags=["labs"])
logger = logging.getLogger(__name__)


@router.get("/labs/sample")
def sample_report():
    """The fixed report text used by the upload flow."""
    return {"text": SAMPLE_LAB_TEXT}


@router.post("/labs/analyze")
def analyze(body: AnalyzeRequest):
    text = body.text or SAMPLE_LAB_TEXT
    try:
        lab = analyze_lab_results(text)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception:
        logger.exception("Lab analysis failed")
        raise HTTPException(status_code=502, detail=ANALYZE_FAILED_MESSAGE)
    logger.info("Analyzed lab report %s with %d markers", lab.id, len(lab.markers))
    return lab.to_dict()


@router.post("/labs/summary")
def summary(lab: LabResult):
    return summarize_lab_result(lab)


@router.post("/recipes")
def recipes(lab: LabResult):
    try:
        items = get_personalized_recipes(lab)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception:
        logger.exception("Recipe generation failed for lab %s", lab.id)
        raise HTTPException(status_code=502, detail=RECIPES_FAILED_MESSAGE)
    return {"count": len(items), "recipes": [r.to_dict() for r in items]}
