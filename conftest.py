"""
Root conftest.py: puts the project root on sys.path so optimizer/,
visualization/ and main.py import without installing the project.
"""
import os
import sys

_PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)
