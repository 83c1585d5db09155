import os
import sys

# Ensure backend packages (apps, cartstate) are importable when running `pytest`
# from the repo root without an editable install
BASE_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.join(BASE_DIR, 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)
