from app.extraction.base import BaseExtractor
from app.pipeline.pipeline import PipelineContext, PipelineStep
from app.pipeline.steps import ExtractFieldsStep, MarkProcessingStep, UploadToStorageStep
from app.storage.base import BaseStorageClient


class Processor:
    """Drives one submission through its steps.

    Pipeline: mark processing -> extract -> upload. A step that records a
    failure halts the remaining steps for that submission only.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, context: PipelineContext) -> PipelineContext:
        for step in self._steps:
            context = step.run(context)
            if context.halted:
                break
        return context


def build_processor(extractor: BaseExtractor, storage: BaseStorageClient) -> Processor:
    """Build a Processor with the standard extract-then-upload steps."""
    return Processor(
        steps=[
            MarkProcessingStep(),
            ExtractFieldsStep(extractor),
            UploadToStorageStep(storage),
        ]
    )
