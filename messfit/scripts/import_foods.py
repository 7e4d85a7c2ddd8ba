import os
import sys

from messfit import create_app
from messfit.services.food_import_service import import_table


def import_foods(path):
    """Import a CSV/TSV file into the food catalog. Needs an app context."""
    with open(path, "r", encoding="utf-8-sig") as f:
        return import_table(f.read())


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python -m messfit.scripts.import_foods <file.csv|file.tsv>")
        return 1

    path = argv[0]
    if not os.path.exists(path):
        print(f"Error: file not found at {path}")
        return 1

    app = create_app()
    with app.app_context():
        print("Starting food import...")
        result = import_foods(path)
        print("\nImport complete!")
        print(f"Total rows: {result['total']}")
        print(f"Added: {result['success']}")
        print(f"Skipped: {result['errors']}")
        for detail in result["error_details"]:
            print(f"  {detail}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
