"""
Export components package.

Each component renders one table of the achievements report.
"""

from .achievements import AchievementsTableComponent, CSV_HEADERS

__all__ = [
    'AchievementsTableComponent',
    'CSV_HEADERS',
]
