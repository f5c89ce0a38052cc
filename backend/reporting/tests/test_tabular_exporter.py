import datetime
import re
from io import BytesIO

from django.test import SimpleTestCase
from openpyxl import load_workbook

from reporting.services import export_tables
from reporting.services.tabular_exporter import (
    CSV,
    PDF,
    XLSX,
    Column,
    ExportTable,
    NothingToExport,
    build_export,
    column_chunks,
    to_csv,
    to_pdf,
)

SIMPLE = ExportTable(context='Admin', entity='Things', columns=(Column('a', 'a'), Column('b', 'b')))


class CsvTests(SimpleTestCase):
    def test_placeholder_for_missing_values(self):
        self.assertEqual(to_csv(SIMPLE.headers, SIMPLE.rows([{'a': 'x', 'b': None}])), '"a","b"\n"x","N/A"')

    def test_column_placeholder_overrides_table_default(self):
        table = ExportTable(context='Admin', entity='Things',
                            columns=(Column('Feedback', 'feedback', placeholder='No feedback yet'),))
        self.assertEqual(table.rows([{}]), [['No feedback yet']])

    def test_embedded_quotes_are_doubled(self):
        out = to_csv(['Topic'], [['say "hi", then leave']])
        self.assertEqual(out, '"Topic"\n"say ""hi"", then leave"')

    def test_line_count(self):
        rows = SIMPLE.rows([{'a': i, 'b': i} for i in range(3)])
        self.assertEqual(len(to_csv(SIMPLE.headers, rows).split('\n')), 4)

    def test_callable_accessor(self):
        table = ExportTable(context='Admin', entity='Things', columns=(Column('Both', lambda r: f"{r['a']}-{r['b']}"),))
        self.assertEqual(table.rows([{'a': 1, 'b': 2}]), [['1-2']])


class BuildExportTests(SimpleTestCase):
    TODAY = datetime.date(2024, 5, 1)

    def test_filename(self):
        table = export_tables.review_reports_table('PrincipalLecturer')
        self.assertEqual(table.filename('csv', today=self.TODAY), 'PrincipalLecturer_Reports_2024-05-01.csv')

    def test_empty_input_produces_no_artifact(self):
        with self.assertRaises(NothingToExport) as ctx:
            build_export(SIMPLE, [], CSV)
        self.assertEqual(str(ctx.exception), 'No things to export')

    def test_unknown_format(self):
        with self.assertRaises(ValueError):
            build_export(SIMPLE, [{'a': 1}], 'docx')

    def test_csv_artifact(self):
        artifact = build_export(SIMPLE, [{'a': 'x', 'b': None}], CSV, today=self.TODAY)
        self.assertEqual(artifact.filename, 'Admin_Things_2024-05-01.csv')
        self.assertEqual(artifact.row_count, 1)
        self.assertEqual(artifact.content.decode('utf-8-sig'), '"a","b"\n"x","N/A"')

    def test_xlsx_artifact(self):
        artifact = build_export(SIMPLE, [{'a': 'x', 'b': 2}], XLSX, today=self.TODAY)
        ws = load_workbook(BytesIO(artifact.content)).active
        self.assertEqual([c.value for c in ws[1]], ['a', 'b'])
        self.assertEqual([c.value for c in ws[2]], ['x', 2])

    def test_pdf_artifact(self):
        artifact = build_export(SIMPLE, [{'a': 'x', 'b': 'y'}], PDF, today=self.TODAY)
        self.assertTrue(artifact.content.startswith(b'%PDF'))
        self.assertEqual(artifact.content_type, 'application/pdf')

    def test_student_table_marks_unsigned_reports(self):
        table = export_tables.student_reports_table()
        row = dict(zip(table.headers, table.rows([{'module_name': 'Web', 'actual_students_present': 3,
                                                    'total_registered_students': 9}])[0]))
        self.assertEqual(row['Student Name'], 'Not signed')
        self.assertEqual(row['Attendance'], '3/9')
        self.assertEqual(row['Venue'], 'N/A')


def _page_count(pdf: bytes) -> int:
    return len(re.findall(rb'/Type /Page(?!s)', pdf))


class PdfColumnTests(SimpleTestCase):
    def test_column_chunks(self):
        self.assertEqual([list(r) for r in column_chunks(5, size=2)], [[0, 1], [2, 3], [4]])
        self.assertEqual([len(r) for r in column_chunks(16)], [14, 2])
        self.assertEqual(column_chunks(0), [])

    def test_wide_tables_continue_on_next_page(self):
        rows = [[f'r{i}c{j}' for j in range(16)] for i in range(3)]
        narrow = to_pdf('t', [f'h{j}' for j in range(14)], [r[:14] for r in rows])
        wide = to_pdf('t', [f'h{j}' for j in range(16)], rows)
        self.assertEqual(_page_count(narrow), 1)
        self.assertEqual(_page_count(wide), 2)
