import pytest

from messfit.extensions import db
from messfit.models.food import Food
from messfit.models.meal_log import MealLog
from messfit.models.user import User
from messfit.services.food_import_service import (
    import_rows,
    import_table,
    list_duplicates,
    merge_duplicates,
    normalize_row,
    split_table,
)
from messfit.utils.http import ServiceError


def collect():
    inserted = []
    return inserted, inserted.append


def test_split_table_comma_and_quotes():
    headers, rows = split_table('Name,Calories,Unit\n"Idli",40,piece\n\nDal,150\n')
    assert headers == ["name", "calories", "unit"]
    assert rows == [
        {"name": "Idli", "calories": "40", "unit": "piece"},
        {"name": "Dal", "calories": "150", "unit": ""},
    ]


def test_split_table_detects_tabs():
    headers, rows = split_table("name\tcalories\nTea\t50")
    assert headers == ["name", "calories"]
    assert rows[0]["calories"] == "50"


def test_zero_calorie_row_is_accepted():
    food, reason = normalize_row({"name": "Water", "calories": "0"})
    assert reason is None
    assert food["calories_per_portion"] == 0


def test_missing_calorie_cell_reads_as_zero():
    food, reason = normalize_row({"name": "Black Coffee", "calories": ""})
    assert reason is None
    assert food["calories_per_portion"] == 0


def test_empty_name_is_rejected():
    food, reason = normalize_row({"name": "  ", "calories": "100"})
    assert food is None
    assert reason == "Missing name"


@pytest.mark.parametrize("value", ["abc", "inf", "nan"])
def test_bad_calories_rejected(value):
    food, reason = normalize_row({"name": "Mystery", "calories": value})
    assert food is None
    assert reason == "Invalid calories for Mystery"


def test_calorie_aliases_are_equivalent():
    results = [
        normalize_row({"name": "Poha", alias: "180"})[0]
        for alias in ("calories_per_portion", "calories", "cal", "energy")
    ]
    assert all(r == results[0] for r in results)
    assert results[0]["calories_per_portion"] == 180


def test_first_non_empty_alias_wins():
    food, _ = normalize_row({"name": "Upma", "calories": "", "cal": "150", "energy": "999"})
    assert food["calories_per_portion"] == 150


def test_units_are_coerced():
    assert normalize_row({"name": "A", "unit": "Bowl"})[0]["unit"] == "bowl"
    assert normalize_row({"name": "B", "unit": "plate"})[0]["unit"] == "piece"
    assert normalize_row({"name": "C"})[0]["unit"] == "piece"


def test_optional_fields_default():
    food, _ = normalize_row({"name": "Samosa", "calories": "150", "protein": "x"})
    assert food["protein_g"] == 0
    assert food["sugar_g"] is None
    assert food["grams_per_unit"] == 100


def test_insert_failure_does_not_stop_the_batch():
    inserted = []

    def insert(food):
        if food["name"] == "Broken":
            raise RuntimeError("constraint failed")
        inserted.append(food["name"])

    _, rows = split_table("name,calories\nIdli,40\nBroken,10\nVada,100\n,50")
    result = import_rows(rows, insert)
    assert inserted == ["Idli", "Vada"]
    assert result["total"] == 4
    assert result["success"] == 2
    assert result["errors"] == 2
    assert result["error_details"] == ["Row 2: Could not save Broken", "Row 4: Missing name"]


def test_error_details_are_limited():
    _, rows = split_table("name,calories\n" + "\n".join(f"Bad{i},x" for i in range(5)))
    inserted, insert = collect()
    result = import_rows(rows, insert, error_limit=2)
    assert result["errors"] == 5
    assert len(result["error_details"]) == 2


def test_empty_import_raises():
    with pytest.raises(ServiceError) as exc:
        import_table("name,calories\n", insert=lambda food: None, error_limit=10)
    assert exc.value.code == "EMPTY_IMPORT"


def test_import_table_writes_catalog(app):
    result = import_table("name,cal,protein,unit\nMasala Dosa,180,4,piece\nSambar,120,5,bowl")
    assert result["success"] == 2
    sambar = Food.query.filter_by(name="Sambar").first()
    assert sambar.unit == "bowl"
    assert sambar.protein_g == 5


def test_merge_duplicates_keeps_lowest_id(app):
    user = User.query.filter_by(email="user@example.com").first()
    first = Food(name="Banana", calories_per_portion=105)
    second = Food(name=" banana ", calories_per_portion=100)
    db.session.add_all([first, second])
    db.session.commit()

    db.session.add(MealLog(
        user_id=user.id, food_id=second.id, food_name="banana", quantity=1, unit="piece",
        calories=100, meal_type="snacks", date="2024-01-01",
    ))
    user.favorite_foods.append(second)
    db.session.commit()

    groups = list_duplicates()
    assert groups == [{"name": "banana", "count": 2, "ids": [first.id, second.id]}]

    assert merge_duplicates() == 1
    assert [f.id for f in Food.query.filter(Food.name.ilike("%banana%")).all()] == [first.id]
    log = MealLog.query.filter_by(user_id=user.id).first()
    assert log.food_id is None
    assert log.calories == 100
    db.session.expire_all()
    assert user.favorite_food_ids == []
