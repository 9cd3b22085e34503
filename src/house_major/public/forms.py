"""Public submission forms: job application, investment inquiry, contact.

Each form validates locally and only then calls its resource client; a
locally rejected submission never reaches the network.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from house_major.client.base import ApiError, FileUpload
from house_major.client.resources import ApplicationsClient, ContactsClient, InvestmentsClient
from house_major.upload_rules import RESUME_RULE, check_upload

logger = logging.getLogger(__name__)

GENERAL_APPLICATION_TITLE = "General Application"

INVESTMENT_NATURES = (
    "Venture Capital",
    "Angel Investment",
    "Strategic Partnership",
    "Other",
)

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class FormOutcome:
    ok: bool
    errors: dict[str, str] = field(default_factory=dict)
    message: str | None = None
    record: dict[str, Any] | None = None


def _require(errors: dict[str, str], name: str, value: str | None, label: str) -> None:
    if not value or not value.strip():
        errors[name] = f"{label} is required"


def _check_email(errors: dict[str, str], value: str | None) -> None:
    if value and value.strip() and not _EMAIL.match(value.strip()):
        errors["email"] = "Please enter a valid email address"


class ApplicationForm:
    """Apply to a posted opening, or with ``career=None`` as a general application."""

    def __init__(self, client: ApplicationsClient, career: dict[str, Any] | None = None) -> None:
        self.client = client
        self.career = career
        self.full_name = ""
        self.email = ""
        self.phone = ""
        self.cover_letter = ""
        self.cv: FileUpload | None = None
        self.errors: dict[str, str] = {}

    @property
    def is_general(self) -> bool:
        return self.career is None

    def select_cv(self, upload: FileUpload | None) -> str | None:
        """Attach a CV; a non-PDF or oversized file is refused inline."""
        if upload is None:
            self.cv = None
            self.errors.pop("cv", None)
            return None
        error = check_upload(RESUME_RULE, upload.filename, upload.content_type, upload.size)
        if error:
            self.cv = None
            self.errors["cv"] = error
            return error
        self.cv = upload
        self.errors.pop("cv", None)
        return None

    def payload(self) -> dict[str, Any]:
        return {
            "fullName": self.full_name.strip(),
            "email": self.email.strip(),
            "phone": self.phone.strip() or None,
            "coverLetter": self.cover_letter.strip() or None,
            "careerId": None if self.is_general else self.career["id"],
            "jobTitle": GENERAL_APPLICATION_TITLE if self.is_general else self.career.get("title"),
        }

    def submit(self) -> FormOutcome:
        errors = {k: v for k, v in self.errors.items() if k == "cv"}
        _require(errors, "fullName", self.full_name, "Full name")
        _require(errors, "email", self.email, "Email")
        _check_email(errors, self.email)
        if errors:
            self.errors = errors
            return FormOutcome(ok=False, errors=errors)
        try:
            record = self.client.submit(self.payload(), resume=self.cv)
        except ApiError as exc:
            logger.warning("Application submission failed: %s", exc.message)
            return FormOutcome(ok=False, message=exc.message)
        return FormOutcome(ok=True, record=record, message="Application submitted successfully!")


def inquiry_message(nature: str, message: str = "") -> str:
    """Body stored for an inquiry; always names the investment nature."""
    text = f"Investment Nature: {nature}"
    if message.strip():
        text = f"{text}\n\n{message.strip()}"
    return text


class InvestmentInquiryForm:
    def __init__(self, client: InvestmentsClient) -> None:
        self.client = client
        self.email = ""
        self.investment_nature = ""
        self.message = ""
        self.errors: dict[str, str] = {}

    def payload(self) -> dict[str, Any]:
        return {
            "email": self.email.strip(),
            "investmentNature": self.investment_nature,
            "message": inquiry_message(self.investment_nature, self.message),
        }

    def submit(self) -> FormOutcome:
        errors: dict[str, str] = {}
        _require(errors, "email", self.email, "Email")
        _check_email(errors, self.email)
        if self.investment_nature not in INVESTMENT_NATURES:
            errors["investmentNature"] = "Please select the nature of your investment"
        self.errors = errors
        if errors:
            return FormOutcome(ok=False, errors=errors)
        try:
            record = self.client.submit_inquiry(self.payload())
        except ApiError as exc:
            return FormOutcome(ok=False, message=exc.message)
        return FormOutcome(ok=True, record=record, message="Thank you for your interest!")


class ContactForm:
    def __init__(self, client: ContactsClient) -> None:
        self.client = client
        self.name = ""
        self.email = ""
        self.message = ""
        self.errors: dict[str, str] = {}

    def submit(self) -> FormOutcome:
        errors: dict[str, str] = {}
        _require(errors, "name", self.name, "Name")
        _require(errors, "email", self.email, "Email")
        _check_email(errors, self.email)
        _require(errors, "message", self.message, "Message")
        self.errors = errors
        if errors:
            return FormOutcome(ok=False, errors=errors)
        try:
            record = self.client.submit(
                {"name": self.name.strip(), "email": self.email.strip(), "message": self.message}
            )
        except ApiError as exc:
            return FormOutcome(ok=False, message=exc.message)
        self.name = self.email = self.message = ""
        return FormOutcome(ok=True, record=record, message="Message sent successfully!")
