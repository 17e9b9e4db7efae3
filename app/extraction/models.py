from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedFields:
    """Metadata extracted from one document. Missing values are empty strings."""

    document_type: str = ""
    document_number: str = ""
    issue_date: str = ""
    subject: str = ""
    signer: str = ""
    recipients: str = ""


# Wire name (as requested from the model) -> attribute name.
FIELD_NAMES: dict[str, str] = {
    "documentType": "document_type",
    "documentNumber": "document_number",
    "issueDate": "issue_date",
    "subject": "subject",
    "signer": "signer",
    "recipients": "recipients",
}
