from googleapiclient.errors import HttpError

from app.auth.gateway import GoogleAuthGateway
from app.logging.logger import Log
from app.sheets.base import BaseSpreadsheetClient
from app.sheets.exceptions import SpreadsheetError


class GoogleSheetsAdapter(BaseSpreadsheetClient):
    """Appends rows to a Google Sheet through the values API."""

    def __init__(self, gateway: GoogleAuthGateway, target_range: str = "A1") -> None:
        self._gateway = gateway
        self._range = target_range

    def append_rows(self, sheet_id: str, rows: list[list[str]]) -> None:
        try:
            response = (
                self._gateway.service("sheets", "v4")
                .spreadsheets()
                .values()
                .append(
                    spreadsheetId=sheet_id,
                    range=self._range,
                    valueInputOption="USER_ENTERED",
                    insertDataOption="INSERT_ROWS",
                    body={"values": rows},
                )
                .execute()
            )
        except HttpError as exc:
            raise SpreadsheetError(f"Sheets append failed: {exc.reason}") from exc
        except OSError as exc:
            raise SpreadsheetError(f"Sheets append failed: {exc}") from exc

        updated = response.get("updates", {}).get("updatedRows", 0)
        Log.info(f"Appended {updated} row(s) to spreadsheet {sheet_id}")
