"""
Check that the cohort data files exist and list their row counts.
Run with: python -m clinical_cohort.scripts.check_data
"""
from pathlib import Path
from clinical_cohort.core.config import DATA_DIR, DATA_FILES
from clinical_cohort.extract.load_records import read_collection

def main():
    print(f"Data directory: {DATA_DIR}\n")
    missing = 0
    for name, file_name in DATA_FILES.items():
        path = Path(DATA_DIR) / file_name
        if not path.exists():
            print(f"  - {file_name}: MISSING")
            missing += 1
            continue
        try:
            df = read_collection(name)
            print(f"  - {file_name}: {len(df)} rows")
        except ValueError as e:
            print(f"  - {file_name}: UNREADABLE ({e})")
            missing += 1

    print("\nData files: " + ("OK" if not missing else f"{missing} problem(s)"))
    return missing

if __name__ == "__main__":
    raise SystemExit(1 if main() else 0)
