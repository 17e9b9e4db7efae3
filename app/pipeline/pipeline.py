from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from app.pipeline.models import Destination, DocumentSubmission

StatusListener = Callable[[DocumentSubmission], None]


def _ignore(_submission: DocumentSubmission) -> None:
    return None


@dataclass(slots=True)
class PipelineContext:
    submission: DocumentSubmission
    folder: Destination
    notify: StatusListener = _ignore
    halted: bool = False


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
