"""
XLSX roster serializer - Implements RosterSerializer protocol via openpyxl.

Builds the workbook in memory and returns its bytes, ready to be attached
to an email.
"""

import io

from openpyxl import Workbook
from openpyxl.styles import Font


class XlsxRosterSerializer:
    """
    Implements RosterSerializer protocol.

    Header row uses the column names in title case; one row per participant.
    """

    filename = "participants.xlsx"
    sheet_title = "Participants"

    def serialize(self, rows: list[dict[str, str]], columns: list[str]) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = self.sheet_title

        ws.append([column.title() for column in columns])
        for cell in ws[1]:
            cell.font = Font(bold=True)

        for row in rows:
            ws.append([row.get(column, "") for column in columns])

        for index, column in enumerate(columns, start=1):
            width = max([len(column)] + [len(str(row.get(column, ""))) for row in rows])
            ws.column_dimensions[ws.cell(row=1, column=index).column_letter].width = width + 2

        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()
