class SpreadsheetError(Exception):
    """Raised when rows cannot be appended to a spreadsheet."""
