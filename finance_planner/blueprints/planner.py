"""
Planner blueprint: plan computation, catalog metadata and saved profiles.
"""

from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from finance_planner.models.holdings import SavedProfile, summarize_holdings
from finance_planner.models.inputs import UserInputs
from finance_planner.services.catalog_service import CatalogService
from finance_planner.services.planning_service import PlanningService
from finance_planner.services.profile_repository import (
    ProfileError,
    ProfileNotFoundError,
    ProfileRepository,
)
from finance_planner.storage.base import StorageError

planner_bp = Blueprint("planner", __name__, url_prefix="/api")


def _catalog_service() -> CatalogService:
    return current_app.extensions["catalog_service"]


def _planning_service() -> PlanningService:
    return current_app.extensions["planning_service"]


def _profiles() -> ProfileRepository:
    return current_app.extensions["profile_repository"]


def _model_response(model: BaseModel, status: int = 200) -> Response:
    """Serialize a pydantic model; non-finite floats become null."""
    return Response(model.model_dump_json(), status=status, mimetype="application/json")


def _validation_error(message: str, error: ValidationError) -> Any:
    details = error.errors(include_url=False, include_context=False)
    return jsonify({"error": message, "details": details}), 400


@planner_bp.route("/plan", methods=["POST"])
def compute_plan() -> Any:
    """Compute a financial plan for the posted household inputs.

    Returns:
        JSON FinancialPlan, or 400 if the inputs are invalid
    """
    try:
        inputs = UserInputs.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return _validation_error("Invalid inputs", e)

    plan = _planning_service().build_plan(inputs, _catalog_service().load())
    return _model_response(plan)


@planner_bp.route("/catalog", methods=["GET"])
def catalog_info() -> Any:
    """Describe the loaded product catalog snapshot."""
    catalog = _catalog_service().load()
    return jsonify(
        {
            "data_version": catalog.data_version,
            "as_of": catalog.as_of,
            "counts": catalog.counts,
        }
    )


@planner_bp.route("/profiles", methods=["GET"])
def list_profiles() -> Any:
    """List saved profile ids."""
    try:
        return jsonify({"profiles": _profiles().list_profiles()})
    except StorageError as e:
        current_app.logger.error(f"Error listing profiles: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@planner_bp.route("/profiles/<profile_id>", methods=["PUT"])
def save_profile(profile_id: str) -> Any:
    """Save inputs and tracked holdings for a profile."""
    try:
        profile = SavedProfile.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return _validation_error("Invalid profile", e)

    try:
        stored = _profiles().save_profile(profile_id, profile)
    except ProfileError as e:
        return jsonify({"error": str(e)}), 400
    except StorageError as e:
        current_app.logger.error(f"Error saving profile {profile_id}: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

    return _model_response(stored)


def _load_profile(profile_id: str) -> Any:
    """Load a profile, or build the error response for why it can't be."""
    try:
        return _profiles().load_profile(profile_id), None
    except ProfileNotFoundError:
        return None, (jsonify({"error": "Profile not found"}), 404)
    except ProfileError as e:
        return None, (jsonify({"error": str(e)}), 422)
    except StorageError as e:
        current_app.logger.error(f"Error loading profile {profile_id}: {str(e)}")
        return None, (jsonify({"error": "Internal server error"}), 500)


@planner_bp.route("/profiles/<profile_id>", methods=["GET"])
def get_profile(profile_id: str) -> Any:
    """Return a saved profile."""
    profile, error = _load_profile(profile_id)
    if error:
        return error
    return _model_response(profile)


@planner_bp.route("/profiles/<profile_id>", methods=["DELETE"])
def delete_profile(profile_id: str) -> Any:
    """Reset a profile by deleting everything saved for it."""
    try:
        deleted = _profiles().delete_profile(profile_id)
    except ProfileError as e:
        return jsonify({"error": str(e)}), 400
    except StorageError as e:
        current_app.logger.error(f"Error deleting profile {profile_id}: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

    if not deleted:
        return jsonify({"error": "Profile not found"}), 404
    return "", 204


@planner_bp.route("/profiles/<profile_id>/plan", methods=["GET"])
def get_profile_plan(profile_id: str) -> Any:
    """Compute a plan from a profile's saved inputs."""
    profile, error = _load_profile(profile_id)
    if error:
        return error
    plan = _planning_service().build_plan(profile.inputs, _catalog_service().load())
    return _model_response(plan)


@planner_bp.route("/profiles/<profile_id>/holdings", methods=["GET"])
def get_profile_holdings(profile_id: str) -> Any:
    """Summarize a profile's tracked SIPs and assets."""
    profile, error = _load_profile(profile_id)
    if error:
        return error
    return _model_response(summarize_holdings(profile.tracked_sips, profile.assets))
