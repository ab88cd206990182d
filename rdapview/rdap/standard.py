"""Fixed boilerplate required by the ICANN RDAP response profile."""

from rdapview.rdap.enums import RemarkType
from rdapview.rdap.models import Link, Notice, Remark

RDAP_CONFORMANCE: tuple[str, ...] = (
    "rdap_level_0",
    "icann_rdap_response_profile_0",
    "icann_rdap_technical_implementation_guide_0",
)

CONTACT_REDACTED_VALUE = "REDACTED FOR PRIVACY"
REGISTRAR_HANDLE_NOT_APPLICABLE = "not applicable"
UNKNOWN_NAME = "(none)"

DOMAIN_STATUS_CODES_NOTICE = Notice(
    title="Status Codes",
    description=(
        "For more information on domain status codes, please visit https://icann.org/epp",
    ),
    links=(
        Link(
            value="https://icann.org/epp",
            rel="alternate",
            href="https://icann.org/epp",
            type="text/html",
        ),
    ),
)

INACCURACY_COMPLAINT_FORM_NOTICE = Notice(
    title="RDDS Inaccuracy Complaint Form",
    description=("URL of the ICANN RDDS Inaccuracy Complaint Form: https://icann.org/wicf",),
    links=(
        Link(
            value="https://icann.org/wicf",
            rel="alternate",
            href="https://icann.org/wicf",
            type="text/html",
        ),
    ),
)

DOMAIN_BOILERPLATE_NOTICES: tuple[Notice, ...] = (
    DOMAIN_STATUS_CODES_NOTICE,
    INACCURACY_COMPLAINT_FORM_NOTICE,
)

TRUNCATED_RESULT_SET_NOTICE = Notice(
    title="Search Policy",
    description=("Search results are limited to a fixed number of objects per query.",),
    type=RemarkType.RESULT_TRUNCATED_UNEXPLAINABLE,
)

CONTACT_PERSONAL_DATA_HIDDEN_DATA_REMARK = Remark(
    title=CONTACT_REDACTED_VALUE,
    description=(
        "Some of the data in this object has been removed.",
        "Contact personal data is visible only to the owning registrar.",
    ),
    type=RemarkType.OBJECT_TRUNCATED_AUTHORIZATION,
)

CONTACT_EMAIL_REDACTED_FOR_DOMAIN = Remark(
    title="EMAIL REDACTED FOR PRIVACY",
    description=(
        "Please query the RDDS service of the Registrar of Record identified in this"
        " output for information on how to contact the Registrant of the queried"
        " domain name.",
    ),
    type=RemarkType.OBJECT_REDACTED_AUTHORIZATION,
)

SUMMARY_DATA_TITLE = "Incomplete Data"


def make_summary_remark(self_link: Link) -> Remark:
    """Remark on non-FULL objects pointing at their FULL version."""
    return Remark(
        title=SUMMARY_DATA_TITLE,
        description=(
            "Summary data only. For complete data, send a specific query for the object.",
        ),
        type=RemarkType.OBJECT_TRUNCATED_UNEXPLAINABLE,
        links=(self_link,),
    )
