from flask import request
from messfit.extensions import db
from messfit.schemas.food_schema import FoodQuerySchema, PendingFoodSchema
from messfit.services.food_helpers import resolve_food, search_foods
from messfit.services.pending_food_service import submit_food
from messfit.services.user_service import get_user
from messfit.utils.http import ok, error, json_body, validate_schema


def list_foods_handler():
    """
    List catalog foods with search and pagination.

    Query Parameters:
        - page: Page number (default: 1)
        - limit: Items per page (default: 20)
        - search: Case-insensitive name filter
        - favorites_only: Only the caller's favourites
    """
    params, errors = validate_schema(FoodQuerySchema, request.args.to_dict())
    if errors:
        return error("VALIDATION_ERROR", "Invalid query parameters", 400, details=errors)

    user = get_user(request.user_id)
    favorite_ids = set(user.favorite_food_ids)
    search = (params["search"] or "").strip()

    query = search_foods(search or None, favorite_ids if params["favorites_only"] else None)
    pagination = query.paginate(page=params["page"], per_page=params["limit"], error_out=False)

    items = []
    for food in pagination.items:
        data = food.to_dict()
        data["is_favorite"] = food.id in favorite_ids
        items.append(data)

    return ok({
        "items": items,
        "total": pagination.total,
        "page": params["page"],
        "limit": params["limit"],
        "pages": pagination.pages,
    })


def get_food_handler(food_id):
    return ok(resolve_food(food_id))


def submit_food_handler():
    data, errors = validate_schema(PendingFoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid food data", 400, details=errors)

    user = get_user(request.user_id)
    try:
        pending = submit_food(user, data)
        return ok(pending.to_dict(), 201)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
