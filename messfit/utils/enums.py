from enum import Enum


class Goal(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACKS = "snacks"
    DINNER = "dinner"


class FoodUnit(str, Enum):
    PIECE = "piece"
    BOWL = "bowl"
    CUP = "cup"
    ML = "ml"
    BAR = "bar"
    CAN = "can"


class PendingStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    TEXT = "text"
    MAIL = "mail"


def values(enum_cls):
    return [e.value for e in enum_cls]
