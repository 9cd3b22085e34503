"""Pydantic schemas for portfolio project endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from house_major.api.schemas.common import CamelModel


class ProjectClient(CamelModel):
    name: str = ""
    logo: str = ""
    industry: str = ""
    location: str = ""


class ExternalLinks(CamelModel):
    live: str | None = None
    github: str | None = None


class DownloadLinks(CamelModel):
    ios: str | None = None
    android: str | None = None


class ProjectResult(CamelModel):
    metric: str
    label: str


class ProjectResponse(CamelModel):
    id: int
    title: str
    description: str
    full_description: str | None = None
    category: str
    date: str
    duration: str | None = None
    images: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    team: list[str] = Field(default_factory=list)
    results: list[ProjectResult] = Field(default_factory=list)
    client: ProjectClient = Field(default_factory=ProjectClient)
    external_links: ExternalLinks = Field(default_factory=ExternalLinks)
    download_links: DownloadLinks = Field(default_factory=DownloadLinks)
    created_at: datetime


class ProjectCreateRequest(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    full_description: str | None = None
    category: str = Field(..., min_length=1, description="Free text, matched by the portfolio filter")
    date: str = Field(..., min_length=1)
    duration: str | None = None
    images: list[str] = Field(default_factory=list, description="Image URLs")
    features: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    team: list[str] = Field(default_factory=list)
    results: list[ProjectResult] = Field(default_factory=list)
    client: ProjectClient = Field(default_factory=ProjectClient)
    external_links: ExternalLinks = Field(default_factory=ExternalLinks)
    download_links: DownloadLinks = Field(default_factory=DownloadLinks)


class ProjectUpdateRequest(CamelModel):
    """All fields optional; only provided fields are updated."""

    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    full_description: str | None = None
    category: str | None = Field(None, min_length=1)
    date: str | None = Field(None, min_length=1)
    duration: str | None = None
    images: list[str] | None = None
    features: list[str] | None = None
    tags: list[str] | None = None
    team: list[str] | None = None
    results: list[ProjectResult] | None = None
    client: ProjectClient | None = None
    external_links: ExternalLinks | None = None
    download_links: DownloadLinks | None = None
