import os
from pathlib import Path

REFERENCE_DIR = Path(os.environ.get("IME_LAYOUTS_REFERENCE_DIR", "reference"))
