
from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()

# project paths
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
DATA_DIR = Path(os.getenv("CLINICAL_DATA_DIR", BASE_DIR / "data"))
LOGS_DIR = Path(os.getenv("CLINICAL_LOGS_DIR", BASE_DIR / "logs"))

# input files
PATIENTS_FILE     = "patients.json"
CONDITIONS_FILE   = "conditions.json"
MEDICATIONS_FILE  = "medications.json"
OBSERVATIONS_FILE = "observations.json"
ENCOUNTERS_FILE   = "encounters.json"

DATA_FILES = {
    "patients": PATIENTS_FILE,
    "conditions": CONDITIONS_FILE,
    "medications": MEDICATIONS_FILE,
    "observations": OBSERVATIONS_FILE,
    "encounters": ENCOUNTERS_FILE,
}

# logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
