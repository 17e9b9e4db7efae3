from app.pipeline.models import Batch, DocumentSubmission, ExtractionStatus

EXPORT_HEADER: list[str] = [
    "documentType",
    "documentNumber",
    "issueDate",
    "subject",
    "signer",
    "recipients",
    "originalFileName",
]


def eligible_submissions(batch: Batch) -> list[DocumentSubmission]:
    """Submissions with extracted fields, in batch order. Storage status is ignored."""
    return [
        s
        for s in batch
        if s.extraction_status is ExtractionStatus.SUCCESS and s.extracted_fields is not None
    ]


def build_export_rows(submissions: list[DocumentSubmission]) -> list[list[str]]:
    """Header row followed by one row per submission."""
    rows = [list(EXPORT_HEADER)]
    for submission in submissions:
        fields = submission.extracted_fields
        if fields is None:
            continue
        rows.append(
            [
                fields.document_type,
                fields.document_number,
                fields.issue_date,
                fields.subject,
                fields.signer,
                fields.recipients,
                submission.file_name,
            ]
        )
    return rows
