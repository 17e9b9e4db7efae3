import io

from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from app.auth.gateway import GoogleAuthGateway
from app.logging.logger import Log
from app.storage.base import BaseStorageClient
from app.storage.exceptions import StorageError


class DriveStorageAdapter(BaseStorageClient):
    """Uploads documents to a Google Drive folder."""

    def __init__(self, gateway: GoogleAuthGateway) -> None:
        self._gateway = gateway

    def upload(self, folder_id: str, payload: bytes, file_name: str, media_type: str) -> str:
        metadata = {
            "name": file_name,
            "mimeType": media_type,
            "parents": [folder_id],
        }
        media = MediaIoBaseUpload(io.BytesIO(payload), mimetype=media_type, resumable=False)
        try:
            created = (
                self._gateway.service("drive", "v3")
                .files()
                .create(body=metadata, media_body=media, fields="id")
                .execute()
            )
        except HttpError as exc:
            raise StorageError(f"Drive upload failed: {exc.reason}") from exc
        except OSError as exc:
            raise StorageError(f"Drive upload failed: {exc}") from exc

        file_id = created.get("id")
        if not file_id:
            raise StorageError("Drive returned no file id")
        Log.info(f"Uploaded '{file_name}' to Drive folder {folder_id} as {file_id}")
        return file_id
