from marshmallow import Schema, fields, validate, pre_load
from messfit.utils.enums import FoodUnit, values


class FoodSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    calories_per_portion = fields.Float(required=True, validate=validate.Range(min=0))
    protein_g = fields.Float(load_default=0, validate=validate.Range(min=0))
    carbs_g = fields.Float(load_default=0, validate=validate.Range(min=0))
    fat_g = fields.Float(load_default=0, validate=validate.Range(min=0))
    fiber_g = fields.Float(load_default=0, validate=validate.Range(min=0))
    sugar_g = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0))
    unit = fields.Str(load_default=FoodUnit.PIECE.value, validate=validate.OneOf(values(FoodUnit)))
    grams_per_unit = fields.Float(load_default=100, validate=validate.Range(min=0))

    @pre_load
    def strip_name(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("name"), str):
            data = dict(data)
            data["name"] = data["name"].strip()
        if isinstance(data, dict) and isinstance(data.get("unit"), str):
            data["unit"] = data["unit"].strip().lower()
        return data


class PendingFoodSchema(FoodSchema):
    sugar_g = fields.Float(load_default=0, validate=validate.Range(min=0))


class FoodQuerySchema(Schema):
    page = fields.Int(load_default=1, validate=validate.Range(min=1))
    limit = fields.Int(load_default=20, validate=validate.Range(min=1, max=100))
    search = fields.Str(allow_none=True, load_default=None)
    favorites_only = fields.Bool(load_default=False)


class BulkDeleteSchema(Schema):
    ids = fields.List(fields.Int(), required=True, validate=validate.Length(min=1))
