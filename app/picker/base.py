from abc import ABC, abstractmethod

from app.pipeline.models import Destination


class BasePicker(ABC):
    """Contract for interactive destination pickers."""

    @abstractmethod
    def pick_folder(self) -> Destination | None:
        """Let the user choose a Drive folder. Returns None if cancelled."""

    @abstractmethod
    def pick_spreadsheet(self) -> Destination | None:
        """Let the user choose a spreadsheet. Returns None if cancelled."""
