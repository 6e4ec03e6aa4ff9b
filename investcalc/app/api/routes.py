"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from investcalc.config import settings
from investcalc.core.formatting import summary_cards
from investcalc.core.forms import parameters_from_form
from investcalc.core.health import get_health
from investcalc.core.projection import (
    ProjectionValidationError,
    compute_projection,
    validate_parameters,
)
from investcalc.schemas.projection import (
    InvestmentParameters,
    ProjectionForm,
    ProjectionResult,
    SummaryResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload: %d schema error(s)", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ProjectionValidationError)
def _handle_projection_error(exc: ProjectionValidationError):
    logger.warning("rejected projection: %s", exc.message)
    return jsonify({"error": exc.message}), HTTPStatus.BAD_REQUEST


def _model_response(model: BaseModel) -> Any:
    # pydantic writes inf/nan as null; json.dumps would emit bare Infinity/NaN
    return current_app.response_class(model.model_dump_json(), mimetype="application/json")


def _project(params: InvestmentParameters) -> ProjectionResult:
    validate_parameters(params)
    if params.years > settings.MAX_PROJECTION_YEARS:
        raise ProjectionValidationError(
            f"Investment years must be at most {settings.MAX_PROJECTION_YEARS}"
        )
    return compute_projection(params)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_health().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Project from already-parsed numeric parameters (rates as fractions)."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    params = InvestmentParameters.model_validate(raw_payload)
    return _model_response(_project(params))


@api_bp.post("/projection/form")
def projection_from_form() -> Any:
    """Project from raw form strings (rates as percentages)."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    form = ProjectionForm.model_validate(raw_payload)
    return _model_response(_project(parameters_from_form(form)))


@api_bp.post("/projection/summary")
def projection_summary() -> Any:
    """Projection plus the formatted headline cards."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    result = _project(InvestmentParameters.model_validate(raw_payload))
    return _model_response(SummaryResponse(cards=summary_cards(result), result=result))
