import os
import sys

# Ensure 'paynotify' package (under backend/paynotify) is importable as top-level
PROJECT_BACKEND = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_BACKEND not in sys.path:
    sys.path.insert(0, PROJECT_BACKEND)
