"""Shared pytest setup for the media renamer tests."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Qt widgets need a platform plugin even when no display is attached
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
