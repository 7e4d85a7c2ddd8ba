from flask import Blueprint
from messfit.utils.auth import require_auth
from messfit.controllers.template_controller import (
    list_templates_handler,
    create_template_handler,
    delete_template_handler,
    apply_template_handler,
)

template_bp = Blueprint("meal_template", __name__, url_prefix="/api/meal-templates")


@template_bp.get("")
@require_auth
def list_templates():
    return list_templates_handler()


@template_bp.post("")
@require_auth
def create_template():
    return create_template_handler()


@template_bp.delete("/<int:id>")
@require_auth
def delete_template(id):
    return delete_template_handler(id)


@template_bp.post("/<int:id>/apply")
@require_auth
def apply_template(id):
    return apply_template_handler(id)
