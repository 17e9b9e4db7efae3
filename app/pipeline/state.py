from dataclasses import dataclass, field

from app.auth.models import UserProfile
from app.pipeline.models import Batch, Destination, SourceFile


@dataclass
class SessionState:
    """Everything the user has chosen during one session.

    Created empty at session start. The selection and batch are replaced
    wholesale on every new file selection; sign-out resets everything.
    """

    selected_files: list[SourceFile] = field(default_factory=list)
    batch: Batch = field(default_factory=Batch)
    folder: Destination | None = None
    sheet: Destination | None = None
    profile: UserProfile | None = None
    is_processing: bool = False
    is_exporting: bool = False

    @property
    def signed_in(self) -> bool:
        return self.profile is not None

    def replace_selection(self, files: list[SourceFile], batch: Batch) -> None:
        self.selected_files = list(files)
        self.batch = batch

    def clear(self) -> None:
        self.selected_files = []
        self.batch = Batch()
        self.folder = None
        self.sheet = None
        self.profile = None
