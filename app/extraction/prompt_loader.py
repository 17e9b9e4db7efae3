from pathlib import Path

from app.extraction.exceptions import ExtractionError

PROMPTS_DIR = Path(__file__).parent / "prompts"
DEFAULT_PROMPT_FILE = "extraction_prompt.txt"
DEFAULT_SCHEMA_FILE = "extraction_schema.json"


def load_prompt_template(path: Path | None = None) -> str:
    """Return the prompt template with ``{file_name}`` and ``{json_schema}`` placeholders.

    Falls back to the bundled prompt when no path is given.
    """
    return _read(path or PROMPTS_DIR / DEFAULT_PROMPT_FILE, "prompt template")


def load_json_schema(path: Path | None = None) -> str:
    """Return the response schema as raw JSON text."""
    return _read(path or PROMPTS_DIR / DEFAULT_SCHEMA_FILE, "JSON schema")


def _read(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load {label}: {exc}") from exc
