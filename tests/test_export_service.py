"""
Unit tests for the achievements CSV export.

Covers:
1. Header-only output for an empty store
2. Column order and Yes/No rendering
3. Quoting of commas, quotes and newlines
4. Unimplemented PDF export
"""

import csv
import io
import unittest

from stutrack.models import Achievement
from stutrack.services.export import AchievementExportService, ExportNotImplementedError
from stutrack.services.export.components import AchievementsTableComponent, CSV_HEADERS
from stutrack.services.export.formatter import ExportFormatter


def export_text(achievements):
    return AchievementExportService.generate_csv(achievements).getvalue().decode('utf-8')


class TestAchievementCsvExport(unittest.TestCase):
    def test_empty_store_is_header_only(self):
        self.assertEqual(export_text([]), "ID,Title,Type,Student,Verified")

    def test_rows_in_store_order(self):
        achievements = [
            Achievement(id=1, title="Science Fair", activity_type="Competition", student_id="S1", student_name="Ann"),
            Achievement(id=2, title="Chess Club", activity_type="Club", student_id="S2", student_name="Bob", verified=True),
        ]
        lines = export_text(achievements).split("\n")

        self.assertEqual(lines, [
            "ID,Title,Type,Student,Verified",
            "1,Science Fair,Competition,Ann,No",
            "2,Chess Club,Club,Bob,Yes",
        ])

    def test_student_column_uses_name_not_id(self):
        text = export_text([Achievement(id=7, title="T", activity_type="X", student_id="S9", student_name="")])
        self.assertEqual(text.split("\n")[1], "7,T,X,,No")

    def test_special_characters_are_quoted(self):
        achievements = [
            Achievement(id=1, title="Fair, 2024", activity_type='The "Best"', student_name="Line\nBreak"),
        ]
        text = export_text(achievements)

        self.assertIn('"Fair, 2024"', text)
        self.assertIn('"The ""Best"""', text)

        rows = list(csv.reader(io.StringIO(text, newline='')))
        self.assertEqual(rows[1], ["1", "Fair, 2024", 'The "Best"', "Line\nBreak", "No"])

    def test_carriage_returns_are_quoted(self):
        achievements = [
            Achievement(id=1, title="a\rb", activity_type="T"),
            Achievement(id=2, title="Windows\r\nLine", activity_type="T", student_name="Ann"),
        ]
        text = export_text(achievements)

        self.assertIn('1,"a\rb",T,,No', text)
        self.assertIn('2,"Windows\r\nLine",T,Ann,No', text)

        rows = list(csv.reader(io.StringIO(text, newline='')))
        self.assertEqual(rows, [
            ["ID", "Title", "Type", "Student", "Verified"],
            ["1", "a\rb", "T", "", "No"],
            ["2", "Windows\r\nLine", "T", "Ann", "No"],
        ])

    def test_returns_rewound_bytes(self):
        output = AchievementExportService.generate_csv([])
        self.assertEqual(output.tell(), 0)
        self.assertIsInstance(output.read(), bytes)

    def test_pdf_export_not_implemented(self):
        with self.assertRaises(ExportNotImplementedError) as ctx:
            AchievementExportService.generate_pdf([])
        self.assertEqual(str(ctx.exception), "PDF export stub - implement on backend")


class TestAchievementsTableComponent(unittest.TestCase):
    def test_render_writes_header_then_rows(self):
        stream = io.StringIO()
        writer = ExportFormatter.create_writer(stream)
        AchievementsTableComponent().render(writer, [Achievement(id=3, title="A", activity_type="B")])

        rows = list(csv.reader(io.StringIO(stream.getvalue())))
        self.assertEqual(rows[0], CSV_HEADERS)
        self.assertEqual(rows[1], ["3", "A", "B", "", "No"])

    def test_strip_final_terminator(self):
        self.assertEqual(ExportFormatter.strip_final_terminator("a\nb\n"), "a\nb")
        self.assertEqual(ExportFormatter.strip_final_terminator("a"), "a")


if __name__ == '__main__':
    unittest.main()
