import sys
from datetime import datetime
from pathlib import Path
# Add src to path
sys.path.append(str(Path(__file__).parent.parent / "src"))

import openpyxl
import pytest
from unittest.mock import MagicMock, patch
from tripmemo.exceptions import InvalidSheetError, MissingColumnsError, TripMemoError
from tripmemo.importer import PhotoSheetImporter

# Helper to create a mock cell
def mock_cell(value, column):
    cell = MagicMock()
    cell.value = value
    cell.column = column
    return cell

# Helper to mock a worksheet
def mock_worksheet(rows_data):
    ws = MagicMock()
    # ws[1] should return a list of cells for the first row
    header_cells = [mock_cell(val, i+1) for i, val in enumerate(rows_data[0])]
    ws.__getitem__.side_effect = lambda key: header_cells if key == 1 else None

    ws.max_row = len(rows_data)

    # Mock cell access by row/column
    def get_cell(row, column, value=None):
        # row is 1-based, data is 0-based
        if 1 <= row <= len(rows_data):
            row_data = rows_data[row-1]
            if 1 <= column <= len(row_data):
                return mock_cell(row_data[column-1], column)
        return mock_cell(None, column)

    ws.cell.side_effect = get_cell
    return ws

def load(mock_load_workbook, rows):
    mock_wb = MagicMock()
    mock_wb.active = mock_worksheet(rows)
    mock_load_workbook.return_value = mock_wb

@pytest.fixture
def importer():
    return PhotoSheetImporter()

@patch("tripmemo.importer.openpyxl.load_workbook")
def test_parse_sheet_valid(mock_load_workbook, importer):
    rows = [
        ["Id", "File", "Date", "Latitude", "Longitude", "Altitude"],
        ["a1", "IMG_001.jpg", datetime(2024, 3, 6, 10, 7, 13), 35.6762, 139.6503, 40],
        ["a2", "IMG_002.jpg", "2024-03-06 12:00:00", "35,7", "139,7", "12,5"],
    ]
    load(mock_load_workbook, rows)

    results = importer.parse_sheet("dummy.xlsx")

    assert len(results) == 2
    p1 = results[0]
    assert p1.id == "a1"
    assert p1.filename == "IMG_001.jpg"
    assert p1.timestamp == datetime(2024, 3, 6, 10, 7, 13)
    assert p1.latitude == 35.6762
    assert p1.longitude == 139.6503
    assert p1.altitude == 40.0

    # String parsing
    p2 = results[1]
    assert p2.timestamp == datetime(2024, 3, 6, 12, 0, 0)
    assert p2.latitude == 35.7
    assert p2.longitude == 139.7
    assert p2.altitude == 12.5

@patch("tripmemo.importer.openpyxl.load_workbook")
def test_parse_spanish_headers(mock_load_workbook, importer):
    rows = [
        ["Archivo", "Fecha", "Latitud", "Longitud", "Altitud"],
        ["foto1.jpg", "06/03/2024 10:07:13", 10.5, -75.2, 100],
    ]
    load(mock_load_workbook, rows)

    results = importer.parse_sheet("dummy.xlsx")

    assert len(results) == 1
    assert results[0].id == "foto1.jpg"  # Falls back to file name
    assert results[0].timestamp == datetime(2024, 3, 6, 10, 7, 13)
    assert results[0].latitude == 10.5

@pytest.mark.parametrize(
    "headers, missing",
    [
        (["Latitud", "Longitud"], ["id", "date"]),
        (["Archivo", "Latitud"], ["date"]),
        (["Fecha", "Latitud"], ["id"]),
    ],
)
@patch("tripmemo.importer.openpyxl.load_workbook")
def test_parse_missing_critical_columns(mock_load_workbook, importer, headers, missing):
    load(mock_load_workbook, [headers, [None] * len(headers)])

    with pytest.raises(ValueError, match="Missing critical columns") as exc_info:
        importer.parse_sheet("dummy.xlsx")

    assert isinstance(exc_info.value, MissingColumnsError)
    assert exc_info.value.missing == missing

@patch("tripmemo.importer.openpyxl.load_workbook")
def test_parse_invalid_coordinates(mock_load_workbook, importer):
    # Rows with unusable coordinates are kept without location
    rows = [
        ["Archivo", "Fecha", "Latitud", "Longitud", "Altitud"],
        ["valid.jpg", "2024-03-06 10:00:00", 10.0, 20.0, 5],
        ["invalid.jpg", "2024-03-06 10:05:00", "bad_lat", 20.0, 5],
        ["missing.jpg", "2024-03-06 10:10:00", None, 20.0, 5],
        ["nogps.jpg", "2024-03-06 10:15:00", None, None, 5],
    ]
    load(mock_load_workbook, rows)

    results = importer.parse_sheet("dummy.xlsx")

    assert [p.id for p in results] == ["valid.jpg", "invalid.jpg", "missing.jpg", "nogps.jpg"]
    assert results[0].has_altitude
    for photo in results[1:]:
        assert not photo.has_coordinates
        assert photo.altitude is None

@patch("tripmemo.importer.openpyxl.load_workbook")
def test_parse_missing_dates(mock_load_workbook, importer):
    rows = [
        ["Id", "Date"],
        ["a", "not a date"],
        ["b", None],
        ["c", "2024-03-06T10:07:13+09:00"],
    ]
    load(mock_load_workbook, rows)

    results = importer.parse_sheet("dummy.xlsx")

    assert [p.timestamp for p in results[:2]] == [None, None]
    assert results[2].timestamp.utcoffset().total_seconds() == 9 * 3600

@patch("tripmemo.importer.openpyxl.load_workbook")
def test_skips_rows_without_identity(mock_load_workbook, importer):
    rows = [
        ["Id", "File", "Date"],
        [None, None, "2024-03-06 10:00:00"],
        [None, "kept.jpg", "2024-03-06 10:00:00"],
    ]
    load(mock_load_workbook, rows)

    results = importer.parse_sheet("dummy.xlsx")

    assert [p.id for p in results] == ["kept.jpg"]

@patch("tripmemo.importer.openpyxl.load_workbook")
def test_parse_headers_case_insensitive(mock_load_workbook, importer):
    rows = [
        ["FILE", "TAKEN", "lat", "Lng", "Elevation"],
        ["foto1.jpg", "2024:03:06 10:07:13", 10.0, 20.0, 90],
    ]
    load(mock_load_workbook, rows)

    results = importer.parse_sheet("dummy.xlsx")

    p1 = results[0]
    assert p1.filename == "foto1.jpg"
    assert p1.timestamp == datetime(2024, 3, 6, 10, 7, 13)
    assert p1.latitude == 10.0
    assert p1.longitude == 20.0
    assert p1.altitude == 90.0

@patch("tripmemo.importer.openpyxl.load_workbook")
def test_formula_cells_are_neutralized(mock_load_workbook, importer):
    rows = [
        ["File", "Date"],
        ["=HYPERLINK(\"x\")", "2024-03-06 10:00:00"],
    ]
    load(mock_load_workbook, rows)

    results = importer.parse_sheet("dummy.xlsx")

    assert results[0].filename.startswith("'=")

def test_parse_real_workbook(tmp_path, importer):
    path = tmp_path / "photos.xlsx"
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["Nº", "Archivo", "Descripción", "Fecha", "Latitud", "Longitud", "Altitud"])
    ws.append([1, "IMG_001.jpg", "Shibuya", datetime(2024, 3, 6, 10, 7, 13), 35.6595, 139.7005, 38.0])
    ws.append([2, "IMG_002.jpg", "Shinjuku", datetime(2024, 3, 6, 11, 30, 0), 35.6938, 139.7034, None])
    wb.save(path)

    results = importer.parse_sheet(path)

    assert [p.id for p in results] == ["IMG_001.jpg", "IMG_002.jpg"]
    assert results[0].timestamp == datetime(2024, 3, 6, 10, 7, 13)
    assert results[0].altitude == 38.0
    assert results[1].has_coordinates
    assert results[1].altitude is None

def test_parse_keeps_mixed_timestamp_kinds(tmp_path, importer):
    path = tmp_path / "mixed.xlsx"
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["Id", "Date"])
    ws.append(["cell", datetime(2024, 5, 1, 9, 0)])
    ws.append(["text", "2024-05-01T10:00:00+09:00"])
    wb.save(path)

    results = importer.parse_sheet(path)

    assert results[0].timestamp.tzinfo is None
    assert results[1].timestamp.utcoffset().total_seconds() == 9 * 3600

@pytest.mark.parametrize(
    "name, content",
    [
        ("broken.xlsx", b"this is not a zip archive"),
        ("notes.txt", b"Id,Date\n"),
    ],
)
def test_unreadable_workbook(tmp_path, importer, name, content):
    path = tmp_path / name
    path.write_bytes(content)

    with pytest.raises(InvalidSheetError) as exc_info:
        importer.parse_sheet(path)

    assert isinstance(exc_info.value, TripMemoError)
    assert exc_info.value.path == path
