from abc import ABC, abstractmethod


class BaseSpreadsheetClient(ABC):
    """Contract for all spreadsheet adapters."""

    @abstractmethod
    def append_rows(self, sheet_id: str, rows: list[list[str]]) -> None:
        """Append rows after the existing data, never overwriting it.

        Raises:
            SpreadsheetError: if the append fails.
        """
