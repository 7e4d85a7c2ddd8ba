from marshmallow import Schema, fields, validate, validates, ValidationError
from messfit.utils.date_keys import is_valid_key
from messfit.utils.enums import ExportFormat, MealType, values


def _date_key(value):
    if value is not None and not is_valid_key(value):
        raise ValidationError("Must be a YYYY-MM-DD date")


class CreateMealLogSchema(Schema):
    # int catalog id or "builtin-<n>"; anything unresolvable logs "Unknown Food"
    food_id = fields.Raw(required=True)
    quantity = fields.Float(load_default=1.0, validate=validate.Range(min=0, min_inclusive=False))
    meal_type = fields.Str(required=True, validate=validate.OneOf(values(MealType)))
    date = fields.Str(allow_none=True, load_default=None, validate=_date_key)
    logged_at = fields.DateTime(allow_none=True, load_default=None)

    @validates("food_id")
    def validate_food_id(self, value, **kwargs):
        if value is None or str(value).strip() == "":
            raise ValidationError("food_id is required")


class TemplateItemSchema(Schema):
    food_id = fields.Raw(required=True)
    quantity = fields.Float(load_default=1.0, validate=validate.Range(min=0, min_inclusive=False))


class CreateTemplateSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    meal_type = fields.Str(required=True, validate=validate.OneOf(values(MealType)))
    items = fields.List(fields.Nested(TemplateItemSchema), required=True, validate=validate.Length(min=1))


class ApplyTemplateSchema(Schema):
    date = fields.Str(allow_none=True, load_default=None, validate=_date_key)


class WaterSchema(Schema):
    amount_ml = fields.Int(required=True)
    date = fields.Str(allow_none=True, load_default=None, validate=_date_key)


class ExportQuerySchema(Schema):
    format = fields.Str(load_default=ExportFormat.CSV.value, validate=validate.OneOf(values(ExportFormat)))
    start = fields.Str(allow_none=True, load_default=None, validate=_date_key)
    end = fields.Str(allow_none=True, load_default=None, validate=_date_key)
    include_summary = fields.Bool(load_default=False)
    include_water = fields.Bool(load_default=False)
