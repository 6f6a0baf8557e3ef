"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from futuro_financeiro.core.pension import project_pension
from futuro_financeiro.core.retirement import estimate_retirement
from futuro_financeiro.core.severance import calculate_severance
from futuro_financeiro.domain.history import HistoryNotFoundError, RecentHistory
from futuro_financeiro.domain.report import pension_report, retirement_report, severance_report
from futuro_financeiro.schemas.history import HistoryKind
from futuro_financeiro.schemas.pension import PensionRequest
from futuro_financeiro.schemas.ping import PingResponse
from futuro_financeiro.schemas.retirement import PersonProfile
from futuro_financeiro.schemas.severance import SeveranceRequest

api_bp = Blueprint("api", __name__)

_REPORTS = {
    HistoryKind.INSS: (retirement_report, "simulacao-inss"),
    HistoryKind.PENSION: (pension_report, "simulacao-previdencia"),
    HistoryKind.SEVERANCE: (severance_report, "calculo-rescisao"),
}


def _history() -> RecentHistory:
    return current_app.extensions["history"]


def _payload() -> Dict[str, Any]:
    raw_payload = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise BadRequest("request body must be a JSON object")
    return raw_payload


def _kind(value: str, result_id: str) -> HistoryKind:
    try:
        return HistoryKind(value)
    except ValueError:
        raise HistoryNotFoundError(value, result_id) from None


def _created(result: BaseModel):
    _history().add(result)
    return jsonify(result.model_dump(mode="json")), HTTPStatus.CREATED


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(HistoryNotFoundError)
def _handle_not_found(exc: HistoryNotFoundError):
    return jsonify({"detail": str(exc)}), HTTPStatus.NOT_FOUND


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse()
    return jsonify(response.model_dump())


@api_bp.post("/calc/inss")
def inss() -> Any:
    """Estimate the INSS retirement benefit and record it."""
    profile = PersonProfile.model_validate(_payload())
    return _created(estimate_retirement(profile))


@api_bp.post("/calc/previdencia")
def previdencia() -> Any:
    """Project a private pension plan and record it."""
    payload = PensionRequest.model_validate(_payload())
    return _created(project_pension(payload))


@api_bp.post("/calc/rescisao")
def rescisao() -> Any:
    """Compute a severance breakdown and record it."""
    payload = SeveranceRequest.model_validate(_payload())
    return _created(calculate_severance(payload))


@api_bp.get("/history")
def history() -> Any:
    return jsonify(_history().snapshot().model_dump(mode="json"))


@api_bp.delete("/history")
def clear_history() -> Any:
    _history().clear()
    return "", HTTPStatus.NO_CONTENT


@api_bp.get("/history/stats")
def history_stats() -> Any:
    return jsonify(_history().stats().model_dump(mode="json"))


@api_bp.get("/history/<kind>/<result_id>")
def history_item(kind: str, result_id: str) -> Any:
    result = _history().find(_kind(kind, result_id), result_id)
    return jsonify(result.model_dump(mode="json"))


@api_bp.delete("/history/<kind>/<result_id>")
def remove_history_item(kind: str, result_id: str) -> Any:
    _history().remove(_kind(kind, result_id), result_id)
    return "", HTTPStatus.NO_CONTENT


@api_bp.get("/history/<kind>/<result_id>/report.pdf")
def history_report(kind: str, result_id: str) -> Any:
    """Printable PDF for a stored result."""
    history_kind = _kind(kind, result_id)
    result = _history().find(history_kind, result_id)
    render, prefix = _REPORTS[history_kind]
    response = current_app.response_class(render(result), mimetype="application/pdf")
    response.headers["Content-Disposition"] = f'attachment; filename="{prefix}-{result.id}.pdf"'
    return response
