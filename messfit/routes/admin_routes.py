from flask import Blueprint
from messfit.utils.auth import require_admin
from messfit.controllers.admin_food_controller import (
    create_food_handler,
    update_food_handler,
    delete_food_handler,
    bulk_delete_foods_handler,
    import_foods_handler,
    list_duplicates_handler,
    merge_duplicates_handler,
    list_pending_handler,
    approve_pending_handler,
    reject_pending_handler,
    get_stats_handler,
)

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")


@admin_bp.route("/foods", methods=["POST"])
@require_admin
def create_food():
    return create_food_handler()


@admin_bp.route("/foods/<int:id>", methods=["PUT"])
@require_admin
def update_food(id):
    return update_food_handler(id)


@admin_bp.route("/foods/<int:id>", methods=["DELETE"])
@require_admin
def delete_food(id):
    return delete_food_handler(id)


@admin_bp.route("/foods/bulk-delete", methods=["POST"])
@require_admin
def bulk_delete_foods():
    return bulk_delete_foods_handler()


@admin_bp.route("/foods/import", methods=["POST"])
@require_admin
def import_foods():
    return import_foods_handler()


@admin_bp.route("/foods/duplicates", methods=["GET"])
@require_admin
def list_duplicates():
    return list_duplicates_handler()


@admin_bp.route("/foods/merge-duplicates", methods=["POST"])
@require_admin
def merge_duplicates():
    return merge_duplicates_handler()


@admin_bp.route("/pending-foods", methods=["GET"])
@require_admin
def list_pending():
    return list_pending_handler()


@admin_bp.route("/pending-foods/<int:id>/approve", methods=["POST"])
@require_admin
def approve_pending(id):
    return approve_pending_handler(id)


@admin_bp.route("/pending-foods/<int:id>/reject", methods=["POST"])
@require_admin
def reject_pending(id):
    return reject_pending_handler(id)


@admin_bp.route("/dashboard/stats", methods=["GET"])
@require_admin
def dashboard_stats():
    return get_stats_handler()
