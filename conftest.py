"""
Root conftest - shared pytest configuration.
Ensures the blog_api package is importable when running pytest from the
repository root without installing it.
"""
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
