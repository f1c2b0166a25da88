"""Error taxonomy shared by the ingestion, storage and analytics layers.

Routers map these onto HTTP status codes; nothing in the core retries.
"""
from __future__ import annotations


class LiftlogError(Exception):
    """Base class for every error raised on purpose by liftlog."""


class SheetValidationError(LiftlogError, ValueError):
    """Structural problem in an imported table: wrong header, bad date, ...

    ``row`` is 1-based and counts the header row. ``column`` is a column name
    or a 1-based column index.
    """

    def __init__(self, message: str, row: int | None = None, column: str | int | None = None):
        self.row = row
        self.column = column
        self.reason = message
        prefix = ""
        if row is not None:
            prefix = f"Row {row}"
            if column is not None:
                prefix += f" ({column})"
            prefix += ": "
        elif column is not None:
            prefix = f"Column {column}: "
        super().__init__(prefix + message)


class ReauthenticationRequired(LiftlogError):
    """The spreadsheet credential is expired or revoked; the user must sign in again."""


class SheetsSourceError(LiftlogError):
    """Any other failure talking to the spreadsheet service."""


class NotFoundError(LiftlogError, LookupError):
    pass


class ConflictError(LiftlogError, ValueError):
    pass
