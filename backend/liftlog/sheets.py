"""Google Sheets values client.

Credentials are obtained and refreshed elsewhere; this module only reads and
writes cell values and translates auth failures into ``ReauthenticationRequired``.
"""
from __future__ import annotations
import logging
from typing import Any, Sequence

from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from liftlog.errors import ReauthenticationRequired, SheetsSourceError

log = logging.getLogger(__name__)

_AUTH_STATUSES = {401, 403}

# typed-in semantics, so "70kg, 5" stays text and "10" becomes a number
VALUE_INPUT_OPTION = "USER_ENTERED"


class GoogleSheetsSource:
    def __init__(self, service: Any):
        self.service = service

    @classmethod
    def from_access_token(cls, token: str) -> "GoogleSheetsSource":
        creds = Credentials(token=token)
        return cls(build("sheets", "v4", credentials=creds, cache_discovery=False))

    def _execute(self, request: Any, spreadsheet_id: str) -> dict:
        try:
            return request.execute()
        except RefreshError as e:
            log.warning("sheets: credential refresh failed for %s: %s", spreadsheet_id, e)
            raise ReauthenticationRequired("Google credentials expired. Please re-authenticate.") from e
        except HttpError as e:
            status = int(e.resp.status)
            if status in _AUTH_STATUSES:
                log.warning("sheets: %s rejected credentials (%s)", spreadsheet_id, status)
                raise ReauthenticationRequired("Google rejected the credentials. Please re-authenticate.") from e
            raise SheetsSourceError(f"Google Sheets request failed ({status})") from e

    # READS
    def get_values(self, spreadsheet_id: str, range_: str) -> list[list[str]]:
        request = self.service.spreadsheets().values().get(
            spreadsheetId=spreadsheet_id,
            range=range_,
        )
        return self._execute(request, spreadsheet_id).get("values", [])

    def sheet_titles(self, spreadsheet_id: str) -> list[str]:
        request = self.service.spreadsheets().get(
            spreadsheetId=spreadsheet_id,
            fields="sheets.properties.title",
        )
        meta = self._execute(request, spreadsheet_id)
        return [s["properties"]["title"] for s in meta.get("sheets", [])]

    # WRITES
    def update_values(self, spreadsheet_id: str, range_: str, values: Sequence[Sequence[Any]]) -> int:
        request = self.service.spreadsheets().values().update(
            spreadsheetId=spreadsheet_id,
            range=range_,
            valueInputOption=VALUE_INPUT_OPTION,
            body={"values": [list(v) for v in values]},
        )
        return self._execute(request, spreadsheet_id).get("updatedCells", 0)

    def append_values(self, spreadsheet_id: str, range_: str, values: Sequence[Sequence[Any]]) -> int:
        """Append rows after the last filled row of ``range_``; returns rows written."""
        request = self.service.spreadsheets().values().append(
            spreadsheetId=spreadsheet_id,
            range=range_,
            valueInputOption=VALUE_INPUT_OPTION,
            insertDataOption="INSERT_ROWS",
            body={"values": [list(v) for v in values]},
        )
        response = self._execute(request, spreadsheet_id)
        return response.get("updates", {}).get("updatedRows", 0)

    def add_sheet(self, spreadsheet_id: str, title: str) -> None:
        request = self.service.spreadsheets().batchUpdate(
            spreadsheetId=spreadsheet_id,
            body={"requests": [{"addSheet": {"properties": {"title": title}}}]},
        )
        self._execute(request, spreadsheet_id)
        log.info("sheets: added sheet %r to %s", title, spreadsheet_id)
