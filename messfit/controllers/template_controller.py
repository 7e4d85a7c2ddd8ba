from flask import request
from messfit.extensions import db
from messfit.schemas.meal_schema import CreateTemplateSchema, ApplyTemplateSchema
from messfit.services.template_service import create_template, list_templates, get_template, delete_template, apply_template
from messfit.utils import date_keys
from messfit.utils.http import ok, error, json_body, validate_schema, ServiceError


def list_templates_handler():
    return ok([t.to_dict() for t in list_templates(request.user_id)])


def create_template_handler():
    data, errors = validate_schema(CreateTemplateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid template data", 400, details=errors)

    try:
        template = create_template(request.user_id, data["name"].strip(), data["meal_type"], data["items"])
        return ok(template.to_dict(), 201)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_template_handler(id):
    if not delete_template(request.user_id, id):
        return error("NOT_FOUND", "Template not found", 404)
    return ok({"message": "Template deleted successfully"})


def apply_template_handler(id):
    template = get_template(request.user_id, id)
    if not template:
        return error("NOT_FOUND", "Template not found", 404)

    data, errors = validate_schema(ApplyTemplateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid date", 400, details=errors)

    try:
        logs = apply_template(request.user_id, template, data["date"] or date_keys.today())
    except ServiceError as e:
        db.session.rollback()
        return error(e.code, e.message, e.status)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok({"logged": [log.to_dict() for log in logs], "count": len(logs)}, 201)
