# foodswipe/api/endpoints/restaurants.py

import logging

from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from foodswipe.models.request_models import RecommendQuery, SuggestionRequest
from foodswipe.models.response_models import ApiResponse
from foodswipe.services.restaurant_service import (
    collect_photos,
    find_restaurant_catalogue,
    find_restaurants,
)
from foodswipe.services.scoring_service import recommend
from foodswipe.services.suggestion_service import SuggestionError, suggest_restaurant

logger = logging.getLogger(__name__)

bp = Blueprint("restaurants", __name__)


def _ok(data):
    return jsonify(ApiResponse(success=True, data=data).model_dump(exclude_unset=True)), 200


def _fail(message, status):
    return jsonify(ApiResponse(success=False, message=message).model_dump(exclude_unset=True)), status


@bp.route("/restaurants", methods=["GET"])
def get_restaurants():
    try:
        restaurants = find_restaurants()
    except Exception:
        logger.exception("Error fetching restaurants")
        return _fail("Failed to fetch restaurants", 500)

    return _ok(restaurants)


@bp.route("/restaurants/photos", methods=["GET"])
def get_restaurant_photos():
    try:
        photos = collect_photos(find_restaurants())
    except Exception:
        logger.exception("Error fetching restaurant photos")
        return _fail("Failed to fetch restaurant photos", 500)

    logger.debug("Serving %d photos", len(photos))
    return _ok(photos)


@bp.route("/restaurants/recommend", methods=["GET"])
def get_recommendations():
    # Location is validated before anything touches the database
    try:
        query = RecommendQuery(**request.args.to_dict())
    except ValidationError:
        return _fail("User location (userLat, userLng) is required", 400)

    try:
        ranked = recommend(find_restaurants(), query.to_location())
    except Exception:
        logger.exception("Error computing recommendations")
        return _fail("Failed to get recommendations", 500)

    logger.info("Recommended %d restaurants", len(ranked))
    return _ok(ranked)


@bp.route("/restaurants/ai-suggestion", methods=["POST"])
def get_ai_suggestion():
    try:
        payload = request.get_json(silent=True) or {}
        req = SuggestionRequest(**payload)
    except (ValidationError, TypeError):
        return _fail("Message is required", 400)

    try:
        answer = suggest_restaurant(req.message, find_restaurant_catalogue())
    except SuggestionError:
        return _fail("Failed to get suggestion from AI", 500)
    except Exception:
        logger.exception("Error building AI suggestion")
        return _fail("Failed to get suggestion from AI", 500)

    return _ok(answer)
