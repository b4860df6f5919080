from ..base import BaseExportComponent
from ..formatter import ExportFormatter

CSV_HEADERS = ['ID', 'Title', 'Type', 'Student', 'Verified']


class AchievementsTableComponent(BaseExportComponent):
    """Header row plus one row per achievement, in submission order."""
    def render(self, writer, achievements):
        writer.writerow(CSV_HEADERS)
        for a in achievements:
            writer.writerow([
                a.id,
                a.title,
                a.activity_type,
                a.student_name,
                ExportFormatter.yes_no(a.verified),
            ])
