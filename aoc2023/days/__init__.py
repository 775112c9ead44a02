from __future__ import annotations

# Importing a day module registers its solution.
from . import day_1

__all__ = ("day_1",)
