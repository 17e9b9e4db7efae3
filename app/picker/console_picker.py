from collections.abc import Callable
from typing import Any

from googleapiclient.errors import HttpError

from app.auth.gateway import GoogleAuthGateway
from app.logging.logger import Log
from app.picker.base import BasePicker
from app.pipeline.models import Destination

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
SPREADSHEET_MIME_TYPE = "application/vnd.google-apps.spreadsheet"


class ConsolePicker(BasePicker):
    """Terminal picker listing Drive items of one kind.

    The user answers with a list number or a pasted Drive id. A blank answer
    cancels the pick.
    """

    def __init__(
        self,
        gateway: GoogleAuthGateway,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
        page_size: int = 50,
    ) -> None:
        self._gateway = gateway
        self._prompt = prompt
        self._echo = echo
        self._page_size = page_size

    def pick_folder(self) -> Destination | None:
        return self._pick(FOLDER_MIME_TYPE, "Drive folder")

    def pick_spreadsheet(self) -> Destination | None:
        return self._pick(SPREADSHEET_MIME_TYPE, "spreadsheet")

    def _pick(self, mime_type: str, label: str) -> Destination | None:
        choices = self._list(mime_type, label)
        if choices is None:
            return None
        self._echo(f"Choose a {label}:")
        for number, choice in enumerate(choices, start=1):
            self._echo(f"  {number}. {choice.name} ({choice.id})")
        answer = self._prompt(f"{label} number or id (blank to cancel): ").strip()
        if not answer:
            Log.info(f"{label} selection cancelled")
            return None
        if answer.isdecimal() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        return self._resolve(answer, mime_type, label)

    def _list(self, mime_type: str, label: str) -> list[Destination] | None:
        try:
            response = (
                self._drive()
                .files()
                .list(
                    q=f"mimeType='{mime_type}' and trashed=false",
                    spaces="drive",
                    fields="files(id, name)",
                    orderBy="modifiedTime desc",
                    pageSize=self._page_size,
                )
                .execute()
            )
        except HttpError as exc:
            Log.warning(f"Cannot list {label}s: {exc.reason}")
            self._echo(f"Cannot list your {label}s right now.")
            return None
        return [Destination(id=f["id"], name=f["name"]) for f in response.get("files", [])]

    def _resolve(self, file_id: str, mime_type: str, label: str) -> Destination | None:
        try:
            item = (
                self._drive()
                .files()
                .get(fileId=file_id, fields="id, name, mimeType")
                .execute()
            )
        except HttpError as exc:
            Log.warning(f"Cannot open {label} '{file_id}': {exc.reason}")
            self._echo(f"Cannot open {label} '{file_id}'.")
            return None
        if item.get("mimeType") != mime_type:
            self._echo(f"'{item.get('name', file_id)}' is not a {label}.")
            return None
        return Destination(id=item["id"], name=item["name"])

    def _drive(self) -> Any:
        return self._gateway.service("drive", "v3")
