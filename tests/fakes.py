"""In-memory stand-ins for the HTTP resource clients."""

from __future__ import annotations

from typing import Any

from house_major.client.base import ApiError
from house_major.client.resources import ApplicationsClient, ResourceClient


class MemoryClient(ResourceClient):
    """Keeps records in a list and records every mutating call."""

    def __init__(self, records: list[dict[str, Any]] | None = None) -> None:
        super().__init__(api=None)
        self.records = [dict(r) for r in records or []]
        self.calls: list[tuple[str, Any]] = []
        self.list_calls = 0
        self.fail_with: ApiError | None = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def list(self) -> list[dict[str, Any]]:
        self.list_calls += 1
        self._check()
        return [dict(r) for r in self.records]

    def create(self, payload) -> dict[str, Any]:
        self._check()
        record = {"id": max((r["id"] for r in self.records), default=0) + 1, **payload}
        self.records.append(record)
        self.calls.append(("create", record))
        return record

    def update(self, record_id: int, payload) -> dict[str, Any]:
        self._check()
        for record in self.records:
            if record["id"] == record_id:
                record.update(payload)
                self.calls.append(("update", record_id))
                return dict(record)
        raise ApiError("Not found", 404)

    def remove(self, record_id: int) -> None:
        self._check()
        self.calls.append(("remove", record_id))
        self.records = [r for r in self.records if r["id"] != record_id]


class MemoryApplicationsClient(MemoryClient, ApplicationsClient):
    def _set_status(self, record_id: int, status: str) -> dict[str, Any]:
        self._check()
        self.calls.append((status.lower(), record_id))
        for record in self.records:
            if record["id"] == record_id:
                record["status"] = status
                return dict(record)
        raise ApiError("Application not found", 404)

    def accept(self, record_id: int) -> dict[str, Any]:
        return self._set_status(record_id, "Accepted")

    def reject(self, record_id: int) -> dict[str, Any]:
        return self._set_status(record_id, "Rejected")
