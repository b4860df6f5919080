import io
import logging

from .base import BaseExportBoard
from .components import AchievementsTableComponent
from .formatter import ExportFormatter

log = logging.getLogger(__name__)

PDF_EXPORT_STUB_MESSAGE = "PDF export stub - implement on backend"


class ExportNotImplementedError(NotImplementedError):
    """Raised by export formats that exist in the UI but have no backend yet."""


class AchievementExportService:
    """Primary service to generate achievement reports."""
    @staticmethod
    def get_report_board():
        board = BaseExportBoard("Achievements")
        board.add_component(AchievementsTableComponent())
        return board

    @staticmethod
    def generate_csv(achievements):
        """
        Renders all achievements as CSV.

        Args:
            achievements: Achievements in store order

        Returns:
            io.BytesIO: UTF-8 encoded CSV, positioned at the start
        """
        achievements = list(achievements)
        text_stream = io.StringIO()
        writer = ExportFormatter.create_writer(text_stream)
        AchievementExportService.get_report_board().render(writer, achievements)

        content = ExportFormatter.strip_final_terminator(text_stream.getvalue())
        output = io.BytesIO(content.encode('utf-8'))
        output.seek(0)
        log.info("Generated CSV export with %d rows", len(achievements))
        return output

    @staticmethod
    def generate_pdf(achievements):
        raise ExportNotImplementedError(PDF_EXPORT_STUB_MESSAGE)
