"""Create/edit form state for the management screens.

A form is a tuple of field specs. Each spec knows how to seed its draft
value(s) from a stored record and how to rebuild the wire value from the
draft on submit. Drafts are plain strings, as a text input would hold them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from house_major.client.base import ApiError, FileUpload
from house_major.upload_rules import UploadRule, check_upload

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Local validation failed; ``errors`` maps draft keys to messages."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = dict(errors)


@dataclass(frozen=True)
class TextField:
    name: str
    label: str
    required: bool = False
    multiline: bool = False
    choices: tuple[str, ...] = ()

    def draft_keys(self) -> tuple[str, ...]:
        return (self.name,)

    def seed(self, record: Mapping[str, Any]) -> dict[str, str]:
        value = record.get(self.name)
        return {self.name: "" if value is None else str(value)}

    def build(self, draft: Mapping[str, str], errors: dict[str, str]) -> Any:
        value = draft.get(self.name, "")
        if not value.strip():
            if self.required:
                errors[self.name] = f"{self.label} is required"
            return None
        if self.choices and value not in self.choices:
            errors[self.name] = f"{self.label} must be one of: {', '.join(self.choices)}"
        return value


@dataclass(frozen=True)
class ListField:
    """A list of strings edited as one line per entry."""

    name: str
    label: str
    required: bool = False

    def draft_keys(self) -> tuple[str, ...]:
        return (self.name,)

    def seed(self, record: Mapping[str, Any]) -> dict[str, str]:
        return {self.name: "\n".join(str(v) for v in record.get(self.name) or [])}

    def build(self, draft: Mapping[str, str], errors: dict[str, str]) -> list[str]:
        lines = [line.strip() for line in draft.get(self.name, "").split("\n")]
        values = [line for line in lines if line]
        if self.required and not values:
            errors[self.name] = f"{self.label} is required"
        return values


@dataclass(frozen=True)
class NestedGroup:
    """A sub-object flattened into ``name.key`` draft entries."""

    name: str
    label: str
    keys: tuple[str, ...]
    omit_empty: bool = False

    def draft_keys(self) -> tuple[str, ...]:
        return tuple(f"{self.name}.{key}" for key in self.keys)

    def seed(self, record: Mapping[str, Any]) -> dict[str, str]:
        nested = record.get(self.name) or {}
        return {
            f"{self.name}.{key}": "" if nested.get(key) is None else str(nested.get(key))
            for key in self.keys
        }

    def build(self, draft: Mapping[str, str], errors: dict[str, str]) -> dict[str, str]:
        result = {key: draft.get(f"{self.name}.{key}", "").strip() for key in self.keys}
        if self.omit_empty:
            result = {key: value for key, value in result.items() if value}
        return result


@dataclass(frozen=True)
class JsonField:
    """Free text that must parse as JSON of the given type."""

    name: str
    label: str
    expected: type = list

    def draft_keys(self) -> tuple[str, ...]:
        return (self.name,)

    def seed(self, record: Mapping[str, Any]) -> dict[str, str]:
        value = record.get(self.name)
        if value is None:
            value = self.expected()
        return {self.name: json.dumps(value, indent=2)}

    def build(self, draft: Mapping[str, str], errors: dict[str, str]) -> Any:
        raw = draft.get(self.name, "")
        if not raw.strip():
            return self.expected()
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as exc:
            errors[self.name] = f"{self.label} must be valid JSON ({exc.msg})"
            return None
        if not isinstance(value, self.expected):
            errors[self.name] = f"{self.label} must be a JSON {self.expected.__name__}"
            return None
        return value


@dataclass(frozen=True)
class FileField:
    """File input; selected files travel as multipart parts, not in the payload."""

    name: str
    label: str
    rule: UploadRule
    multiple: bool = False
    max_files: int | None = None

    def draft_keys(self) -> tuple[str, ...]:
        return ()

    def seed(self, record: Mapping[str, Any]) -> dict[str, str]:
        return {}

    def check(self, uploads: Sequence[FileUpload]) -> str | None:
        if not self.multiple and len(uploads) > 1:
            return f"{self.label}: select a single file"
        if self.max_files is not None and len(uploads) > self.max_files:
            return f"{self.label}: at most {self.max_files} files"
        for upload in uploads:
            error = check_upload(self.rule, upload.filename, upload.content_type, upload.size)
            if error:
                return error
        return None


FormField = TextField | ListField | NestedGroup | JsonField | FileField

# (record id or None, payload, selected files) -> saved record
SaveHandler = Callable[[int | None, dict[str, Any], dict[str, list[FileUpload]]], dict[str, Any]]


@dataclass
class SubmitResult:
    ok: bool
    record: dict[str, Any] | None = None
    errors: dict[str, str] = field(default_factory=dict)
    message: str | None = None


class FormController:
    """Draft state of one create/edit modal."""

    def __init__(
        self,
        fields: Sequence[FormField],
        save: SaveHandler,
        on_saved: Callable[[dict[str, Any]], None] | None = None,
    ) -> None:
        self.fields = tuple(fields)
        self._save = save
        self._on_saved = on_saved
        self.is_open = False
        self.editing_id: int | None = None
        self.draft: dict[str, str] = {}
        self.files: dict[str, list[FileUpload]] = {}
        self.errors: dict[str, str] = {}
        self.server_error: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def _field(self, name: str) -> FormField:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def open(self, existing: Mapping[str, Any] | None = None) -> None:
        """Open blank for create, or seeded from ``existing`` for edit."""
        record = existing or {}
        self.draft = {}
        for spec in self.fields:
            self.draft.update(spec.seed(record))
        self.editing_id = record.get("id") if existing else None
        self.files = {}
        self.errors = {}
        self.server_error = None
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        self.editing_id = None
        self.draft = {}
        self.files = {}
        self.errors = {}
        self.server_error = None

    def field_change(self, key: str, value: str) -> None:
        self.draft[key] = value
        self.errors.pop(key, None)
        self.errors.pop(key.split(".", 1)[0], None)

    def select_files(self, name: str, uploads: Sequence[FileUpload]) -> str | None:
        """Attach files to a file field, rejecting them on a rule violation.

        Returns:
            The inline error, or None when the files were accepted.
        """
        spec = self._field(name)
        if not isinstance(spec, FileField):
            raise TypeError(f"{name} is not a file field")
        error = spec.check(uploads)
        if error:
            self.files.pop(name, None)
            self.errors[name] = error
            return error
        self.errors.pop(name, None)
        self.files[name] = list(uploads)
        return None

    def build_payload(self) -> dict[str, Any]:
        """Rebuild the complete record from the draft.

        Raises:
            ValidationError: If any field fails local validation.
        """
        file_fields = {spec.name for spec in self.fields if isinstance(spec, FileField)}
        # A rejected file selection keeps blocking submission.
        errors = {k: v for k, v in self.errors.items() if k in file_fields}
        payload: dict[str, Any] = {}
        for spec in self.fields:
            if isinstance(spec, FileField):
                continue
            payload[spec.name] = spec.build(self.draft, errors)
        if errors:
            raise ValidationError(errors)
        return payload

    def validate(self) -> dict[str, Any] | None:
        """Build the payload, recording local errors; None when invalid."""
        self.server_error = None
        try:
            return self.build_payload()
        except ValidationError as exc:
            self.errors = exc.errors
            return None

    def save(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Send a validated payload through the save handler.

        Touches no form state, so it may run off the UI thread.
        """
        return self._save(self.editing_id, payload, dict(self.files))

    def finish(self, record: dict[str, Any], notify: bool = True) -> SubmitResult:
        self.close()
        if notify and self._on_saved is not None:
            self._on_saved(record)
        return SubmitResult(ok=True, record=record)

    def fail(self, exc: ApiError) -> SubmitResult:
        """Keep the draft open with the server's message."""
        logger.warning("Save rejected: %s", exc.message)
        self.server_error = exc.message
        return SubmitResult(ok=False, message=exc.message)

    def submit(self) -> SubmitResult:
        """Validate, then create or update through the save handler.

        Local failures never reach the handler. On a server rejection the draft
        is kept so the user can fix it.
        """
        payload = self.validate()
        if payload is None:
            return SubmitResult(ok=False, errors=self.errors)
        try:
            record = self.save(payload)
        except ApiError as exc:
            return self.fail(exc)
        return self.finish(record)
