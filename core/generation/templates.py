"""Built-in document templates.

Each template is a title plus the ordered section names used to scaffold a
new document.
"""

from app.models.document import TemplateDefinition


DEFAULT_TEMPLATES: dict[str, TemplateDefinition] = {
    "contract": TemplateDefinition(
        title="Legal Contract",
        sections=["Header", "Parties", "Terms", "Conditions", "Signatures"],
    ),
    "brief": TemplateDefinition(
        title="Legal Brief",
        sections=["Title", "Statement of Facts", "Legal Issues", "Arguments", "Conclusion"],
    ),
    "memo": TemplateDefinition(
        title="Legal Memorandum",
        sections=["To", "From", "Date", "Subject", "Issue", "Analysis", "Conclusion"],
    ),
    "complaint": TemplateDefinition(
        title="Legal Complaint",
        sections=[
            "Heading",
            "Introduction",
            "Jurisdiction",
            "Parties",
            "Facts",
            "Claims",
            "Prayer for Relief",
        ],
    ),
    "agreement": TemplateDefinition(
        title="Agreement",
        sections=["Preamble", "Recitals", "Terms and Conditions", "Signatures"],
    ),
}
