import argparse
import sys
from pathlib import Path

from app.auth.exceptions import AuthError
from app.auth.gateway import GoogleAuthGateway
from app.config.settings import Settings
from app.extraction.factory import ExtractorFactory
from app.logging.logger import Log
from app.picker.console_picker import ConsolePicker
from app.pipeline.exceptions import PipelineError
from app.pipeline.file_loader import FileLoader
from app.pipeline.models import Destination, DocumentSubmission, ExtractionStatus
from app.pipeline.orchestrator import Orchestrator
from app.pipeline.processor import build_processor
from app.session.controller import SessionController
from app.sheets.google_sheets_adapter import GoogleSheetsAdapter
from app.storage.drive_adapter import DriveStorageAdapter


def build_controller(settings: Settings) -> SessionController:
    """Wire adapters, orchestrator and controller from settings."""
    gateway = GoogleAuthGateway(
        client_secrets_file=Path(settings.google_client_secrets_file),
        token_file=Path(settings.google_token_file) if settings.google_token_file else None,
        port=settings.google_oauth_port,
    )
    processor = build_processor(
        extractor=ExtractorFactory.create(settings),
        storage=DriveStorageAdapter(gateway),
    )
    orchestrator = Orchestrator(
        processor=processor,
        spreadsheet=GoogleSheetsAdapter(gateway),
        accepted_media_type=settings.accepted_media_type,
    )
    orchestrator.add_listener(print_status)
    return SessionController(orchestrator, gateway, ConsolePicker(gateway))


def print_status(submission: DocumentSubmission) -> None:
    """Print one status line per change."""
    line = (
        f"{submission.file_name}: extraction={submission.extraction_status.value} "
        f"drive={submission.storage_status.value}"
    )
    if submission.extraction_error:
        line += f" | extraction error: {submission.extraction_error}"
    if submission.storage_error:
        line += f" | drive error: {submission.storage_error}"
    print(line)


def print_results(controller: SessionController) -> None:
    for submission in controller.state.batch:
        fields = submission.extracted_fields
        if submission.extraction_status is ExtractionStatus.SUCCESS and fields is not None:
            print(
                f"- {submission.file_name}: {fields.document_type} | {fields.document_number} | "
                f"{fields.issue_date} | {fields.subject} | {fields.signer} | {fields.recipients}"
            )
        else:
            print(f"- {submission.file_name}: could not extract data")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docsheet",
        description=(
            "Extract metadata from PDF documents, store them in Google Drive "
            "and append the results to a Google Sheet."
        ),
    )
    parser.add_argument("files", nargs="+", type=Path, help="PDF files to process")
    parser.add_argument("--folder-id", help="Drive folder id (skips the folder picker)")
    parser.add_argument("--sheet-id", help="Spreadsheet id (skips the spreadsheet picker)")
    parser.add_argument(
        "--no-sheet", action="store_true", help="Do not offer saving to a spreadsheet"
    )
    return parser.parse_args(argv)


def run(controller: SessionController, args: argparse.Namespace, settings: Settings) -> int:
    warning = controller.select_files(FileLoader().load_all(args.files))
    if warning:
        print(warning)
    if not controller.state.batch:
        print("No PDF files to process.")
        return 1

    if controller.sign_in() is None:
        print("Sign-in cancelled.")
        return 1

    folder_id = args.folder_id or settings.drive_folder_id
    if folder_id:
        controller.use_drive_folder(
            Destination(id=folder_id, name=settings.drive_folder_name or folder_id)
        )
    elif controller.select_drive_folder() is None:
        print("No Drive folder chosen.")
        return 1

    summary = controller.process()
    print(
        f"Done: {summary.extracted}/{summary.total} extracted, "
        f"{summary.uploaded} stored in Drive."
    )
    print_results(controller)

    if args.no_sheet or summary.extracted == 0:
        return 0
    sheet_id = args.sheet_id or settings.sheet_id
    sheet = Destination(id=sheet_id, name=settings.sheet_name or sheet_id) if sheet_id else None
    outcome = controller.save_to_sheet(sheet)
    if outcome is not None:
        print(f"Saved {outcome.rows_appended} row(s) to \"{outcome.destination_name}\".")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> adapters -> one interactive session."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        controller = build_controller(settings)
        return run(controller, args, settings)
    except (PipelineError, AuthError, FileNotFoundError, ValueError) as exc:
        Log.error(str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        Log.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
