from marshmallow import Schema, fields, validate
from messfit.utils.enums import Gender, Goal, Theme, values


class RegisterSchema(Schema):
    name = fields.Str(load_default="")
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=6))


class OnboardingSchema(Schema):
    age = fields.Int(allow_none=True, validate=validate.Range(min=10, max=120))
    gender = fields.Str(validate=validate.OneOf(values(Gender)))
    height_cm = fields.Float(validate=validate.Range(min=50, max=300))
    weight_kg = fields.Float(validate=validate.Range(min=20, max=500))
    goal = fields.Str(validate=validate.OneOf(values(Goal)))


class ProfileUpdateSchema(Schema):
    name = fields.Str(validate=validate.Length(min=1))
    age = fields.Int(allow_none=True, validate=validate.Range(min=10, max=120))
    gender = fields.Str(validate=validate.OneOf(values(Gender)))
    height_cm = fields.Float(validate=validate.Range(min=50, max=300))
    weight_kg = fields.Float(validate=validate.Range(min=20, max=500))


class GoalSchema(Schema):
    goal = fields.Str(required=True, validate=validate.OneOf(values(Goal)))


class SettingsSchema(Schema):
    water_auto_calculate = fields.Bool()
    water_glass_size_ml = fields.Int(validate=validate.Range(min=50, max=2000))
    water_custom_target_ml = fields.Int(validate=validate.Range(min=250, max=10000))
    theme = fields.Str(validate=validate.OneOf(values(Theme)))
    daily_calorie_target = fields.Int(allow_none=True, validate=validate.Range(min=800, max=10000))
