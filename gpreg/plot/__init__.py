# gpreg/plot/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
gpreg plotting utilities.
"""

from .plotutils import Figure

__all__ = ["Figure", "plotutils"]

from . import plotutils
