"""Display labels and output formatters for advisory results."""

import json

from advisor.evaluation.evaluator import AVG_TEMP_THRESHOLD_C, FROST_TEMP_THRESHOLD_C
from advisor.models.evaluation import EvaluationResult, Rating, Recommendation
from advisor.models.reporting import AdvisoryOutcome, AdvisoryReport
from advisor.models.request import RequestState

RECOMMENDATION_LABELS = {
    Recommendation.GO: "Go (Good/Excellent)",
    Recommendation.NO_GO: "No-Go (Wait)",
}

RATING_LABELS = {
    Rating.EXCELLENT: "Excellent",
    Rating.GOOD: "Good",
    Rating.MARGINAL: "Marginal",
    Rating.POOR: "Poor",
}

WARM_DAYS_CAPTION = f"Days with Avg ≥ {AVG_TEMP_THRESHOLD_C:g}°C"
FROST_DAYS_CAPTION = f"Days with Min < {FROST_TEMP_THRESHOLD_C:g}°C"


def recommendation_tone(result: EvaluationResult) -> str:
    """Colour class for the recommendation panel: go, marginal or wait."""
    if result.recommendation == Recommendation.GO:
        return "go"
    if result.rating == Rating.MARGINAL:
        return "marginal"
    return "wait"


def report_to_dict(r: AdvisoryReport) -> dict:
    e = r.evaluation
    return {
        "postcode": r.postcode,
        "latitude": r.latitude,
        "longitude": r.longitude,
        "days_evaluated": r.days_evaluated,
        "days_above_threshold": e.days_above_threshold,
        "frost_days": e.frost_days,
        "recommendation": e.recommendation.value,
        "recommendation_label": RECOMMENDATION_LABELS[e.recommendation],
        "rating": e.rating.value,
        "rating_label": RATING_LABELS[e.rating],
        "tone": recommendation_tone(e),
    }


def state_to_dict(s: RequestState) -> dict:
    return {
        "status": s.status.value,
        "request_id": s.request_id,
        "postcode": s.postcode,
        "result": report_to_dict(s.report) if s.report is not None else None,
        "error": s.error,
        "updated_at": s.updated_at,
    }


def format_outcome_text(o: AdvisoryOutcome) -> str:
    """Plain text rendering for the terminal."""
    if o.report is None:
        return f"Error: {o.error}"

    r = o.report
    e = r.evaluation
    lines = [
        f"=== Sowing Advice for {r.postcode} ({r.latitude:.4f}, {r.longitude:.4f}) ===",
        f"{r.days_evaluated}-Day Weather",
        f"  {WARM_DAYS_CAPTION}: {e.days_above_threshold}",
        f"  {FROST_DAYS_CAPTION}: {e.frost_days}",
        f"Recommendation: {RECOMMENDATION_LABELS[e.recommendation]}",
        f"Overall Rating: {RATING_LABELS[e.rating]}",
    ]
    return "\n".join(lines)


def format_outcome_json(o: AdvisoryOutcome) -> str:
    """JSON rendering for programmatic consumption."""
    data = {
        "postcode": o.postcode,
        "ok": o.ok,
        "result": report_to_dict(o.report) if o.report is not None else None,
        "error": o.error,
        "duration_seconds": round(o.duration_seconds, 3),
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
