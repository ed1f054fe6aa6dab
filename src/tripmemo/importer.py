import logging
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List, Optional
from zipfile import BadZipFile

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from .exceptions import InvalidSheetError, MissingColumnsError
from .models import Photo

logger = logging.getLogger(__name__)


class PhotoSheetImporter:
    """Imports photo records from an Excel sheet.

    Reads headers dynamically (case-insensitive) and supports columns with text
    containing: "Id", "File", "Date", "Latitude", "Longitude", "Altitude".
    A row is identified by its Id column, or by its file name when no Id
    column exists.
    """

    HEADER_KEYS = {
        "id": ["id", "photo_id", "uuid"],
        "file": ["archivo", "file", "nombre", "filename"],
        "date": ["fecha", "date", "datetime", "timestamp", "taken"],
        "latitude": ["latitud", "lat", "latitude"],
        "longitude": ["longitud", "lon", "long", "lng", "longitude"],
        "altitude": ["altitud", "alt", "altitude", "elevacion", "elevation"],
    }

    DATE_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y:%m:%d %H:%M:%S", "%d/%m/%Y %H:%M:%S", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d", "%d/%m/%Y")

    def parse_sheet(self, sheet_path: Path | str) -> List[Photo]:
        sheet_path = Path(sheet_path)
        try:
            wb = openpyxl.load_workbook(sheet_path, data_only=True)
        except (InvalidFileException, BadZipFile, KeyError) as e:
            raise InvalidSheetError(sheet_path, str(e)) from e
        ws = wb.active

        header_map = self._map_headers(ws[1])
        logger.info(f"Detected header map: {header_map}")

        missing = []
        if "id" not in header_map and "file" not in header_map:
            missing.append("id")
        if "date" not in header_map:
            missing.append("date")
        if missing:
            raise MissingColumnsError(missing)

        results: List[Photo] = []
        for row_idx in range(2, ws.max_row + 1):

            def _val(col_key: str):
                col = header_map.get(col_key)
                return ws.cell(row=row_idx, column=col).value if col else None

            filename = _sanitize_cell_value(_val("file"))
            filename = str(filename).strip() if filename not in (None, "") else ""
            raw_id = _val("id")
            photo_id = str(raw_id).strip() if raw_id not in (None, "") else filename
            if not photo_id:
                continue

            timestamp = self._parse_datetime(_val("date"))
            if timestamp is None:
                logger.warning(f"Row {row_idx}: Missing or invalid date for {photo_id}.")

            lat = self._to_float_or_none(_val("latitude"), row_idx)
            lon = self._to_float_or_none(_val("longitude"), row_idx)
            if (lat is None) != (lon is None):
                logger.warning(f"Row {row_idx}: Only one coordinate present. Treating as no GPS.")
                lat = lon = None

            altitude = self._to_float_or_none(_val("altitude"), row_idx) if lat is not None else None

            results.append(
                Photo(
                    id=photo_id,
                    timestamp=timestamp,
                    latitude=lat,
                    longitude=lon,
                    altitude=altitude,
                    filename=filename,
                )
            )

        logger.info(f"Imported {len(results)} photo records from {sheet_path.name}")
        return results

    def _map_headers(self, header_row) -> Dict[str, int]:
        header_map: Dict[str, int] = {}
        for cell in header_row:
            if cell.value is None:
                continue
            text = str(cell.value).strip().lower()
            if not text:
                continue
            for key, variants in self.HEADER_KEYS.items():
                if key in header_map:
                    continue
                if key == "id":
                    # Exact match only, otherwise "Latitude" or "Video" would match.
                    matched = text in variants
                else:
                    matched = any(v in text for v in variants)
                if matched:
                    header_map[key] = cell.column  # 1-based index
                    break
        return header_map

    def _to_float(self, value) -> float:
        if isinstance(value, (int, float)):
            return float(value)
        s = str(value).strip().replace(",", ".")
        return float(s)

    def _to_float_or_none(self, value, row_idx: int) -> Optional[float]:
        if value in (None, ""):
            return None
        try:
            return self._to_float(value)
        except ValueError:
            logger.warning(f"Row {row_idx}: Invalid number {value!r}. Ignoring it.")
            return None

    def _parse_datetime(self, value) -> Optional[datetime]:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, datetime.min.time())
        txt = str(value).strip()
        for fmt in self.DATE_FORMATS:
            try:
                return datetime.strptime(txt, fmt)
            except ValueError:
                pass
        try:
            return datetime.fromisoformat(txt)
        except ValueError:
            return None


def _sanitize_cell_value(value):
    """
    Neutralize text cells that look like spreadsheet formulas.
    Dangerous formulas start with: =, @, tab, carriage return.
    """
    if isinstance(value, str):
        if value.strip().startswith(("=", "@", "\t", "\r")):
            logger.warning(f"Sanitized potentially dangerous cell value: {value[:20]}...")
            return "'" + value
    return value
