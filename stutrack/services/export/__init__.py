"""
Export service package for generating achievement reports.

Main entry points:
    AchievementExportService.generate_csv(achievements)
    AchievementExportService.generate_pdf(achievements)  (not implemented)
"""

from .service import AchievementExportService, ExportNotImplementedError

__all__ = ['AchievementExportService', 'ExportNotImplementedError']
