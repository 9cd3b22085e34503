"""Seed data for a fresh database.

Seeding is idempotent: rows are matched by title and only missing ones are
inserted.
"""

from __future__ import annotations

import logging
from typing import Any

from house_major.data.db import get_session
from house_major.data.models import Project, Service

logger = logging.getLogger(__name__)

SEED_SERVICES: list[dict[str, str]] = [
    {
        "title": "Software Development",
        "description": (
            "Our services aim to improve smooth operations for organizations and "
            "entities using technological innovations."
        ),
        "icon": "PaintBrushIcon",
    },
    {
        "title": "Data Security",
        "description": (
            "We help protect systems and data for entities, entrusted in handling data "
            "management technologies and protective measures against cyber-attacks."
        ),
        "icon": "RectangleGroupIcon",
    },
    {
        "title": "Tech Consultancy",
        "description": (
            "We facilitate giving insights in technology and consultancy services in "
            "setting up systems for business and organizations."
        ),
        "icon": "CodeBracketIcon",
    },
    {
        "title": "AI Model Development",
        "description": (
            "We build AI models in various disciplines useful in shaping and improving "
            "the nature of organizations and businesses."
        ),
        "icon": "DevicePhoneMobileIcon",
    },
    {
        "title": "DevOps",
        "description": (
            "Integrating pipelines to access clients across the globe, putting you "
            "closer to your clients."
        ),
        "icon": "MegaphoneIcon",
    },
    {
        "title": "Cybersecurity",
        "description": (
            "We build system defensive technologies against various attacks from across "
            "the internet."
        ),
        "icon": "MagnifyingGlassIcon",
    },
    {
        "title": "Geospatial Analysis",
        "description": (
            "We help entities determine suitable locations and expansion opportunities "
            "using geospatial technologies."
        ),
        "icon": "MagnifyingGlassIcon",
    },
]

_UNSPLASH = "https://images.unsplash.com/{}?q=80&w=2000&auto=format&fit=crop"

SEED_PROJECTS: list[dict[str, Any]] = [
    {
        "category": "Ai model development",
        "title": "AI-Powered Digital Health App",
        "description": (
            "Be Okay: An AI-powered health mobile app bridging the gap between disease "
            "exposure and treatment through virtual consultations, symptom checks, and "
            "interventions."
        ),
        "full_description": (
            "Be Okay is an AI-powered health mobile app aimed to bridge the gap and time "
            "between disease exposure and actual health treatment through real-time "
            "virtual consultations, symptom checks, and early health interventions and "
            "patient follow-up."
        ),
        "client": {
            "name": "Be Okay Initiative",
            "logo": "",
            "industry": "Healthcare",
            "location": "Kigali, Rwanda",
        },
        "date": "2024",
        "duration": "Ongoing",
        "team": ["Mobile Developer", "AI Specialist", "UI/UX Designer"],
        "tags": ["AI", "Mobile App", "Healthcare", "Flutter"],
        "features": [
            "Real-time virtual consultations",
            "AI symptom checker",
            "Early health intervention",
            "Patient follow-up system",
        ],
        "images": [
            _UNSPLASH.format("photo-1576091160550-2173dba999ef"),
            _UNSPLASH.format("photo-1551650975-87deedd944c3"),
        ],
        "external_links": {"live": "#", "github": "#"},
        "download_links": {"ios": "#", "android": "#"},
        "results": [],
    },
    {
        "category": "Ai model development",
        "title": "AI System for Community Health",
        "description": (
            "Empowering Community Health Workers and improving gender equity in Rwanda "
            "through an AI-powered, digitalized system for Universal Health Coverage."
        ),
        "full_description": None,
        "client": {
            "name": "WelTel / RBC / MoH",
            "logo": "",
            "industry": "Public Health",
            "location": "Rwanda",
        },
        "date": "2023",
        "duration": "Ongoing",
        "team": ["AI Engineer", "Project Manager", "Health Specialist"],
        "tags": ["AI", "Public Health", "UHC", "Data"],
        "features": [
            "AI-powered diagnostics",
            "Digitalized reporting",
            "Gender equity focus",
            "Enhanced access to care",
        ],
        "images": [_UNSPLASH.format("photo-1624727828489-a1e03b79b14a")],
        "external_links": {"live": "#"},
        "download_links": {},
        "results": [],
    },
    {
        "category": "Geospatial analysis",
        "title": "MV Electrification Line - Gisagara",
        "description": (
            "Providing GIS consultancy for an electrification project by NPD, conducting "
            "surveys on grid accessibility and optimizing line construction."
        ),
        "full_description": None,
        "client": {
            "name": "NPD",
            "logo": "",
            "industry": "Energy",
            "location": "Gisagara District, Rwanda",
        },
        "date": "2022",
        "duration": "12 months",
        "team": ["GIS Specialist", "Surveyor", "Project Engineer"],
        "tags": ["GIS", "Electrification", "Surveying", "Infrastructure"],
        "features": [
            "GIS data analysis",
            "Grid accessibility surveys",
            "Route planning",
            "Project mapping",
        ],
        "images": [_UNSPLASH.format("photo-1506729623303-12a9336a9925")],
        "external_links": {"live": "#"},
        "download_links": {},
        "results": [],
    },
    {
        "category": "Tech consultancy",
        "title": "Tech Consultancy & Capacity Building",
        "description": (
            "Serving as a technology and strategy consultant for the WelTel system and "
            "providing capacity building to its beneficiaries including RBC, MoH, and Nurses."
        ),
        "full_description": None,
        "client": {
            "name": "WelTel",
            "logo": "",
            "industry": "Healthcare Technology",
            "location": "Rwanda",
        },
        "date": "2023",
        "duration": "6 months",
        "team": ["Consultant", "Trainer", "Strategist"],
        "tags": ["Consultancy", "Capacity Building", "Strategy", "Healthcare"],
        "features": [
            "System analysis",
            "Strategic planning",
            "User training programs",
            "Stakeholder workshops",
        ],
        "images": [_UNSPLASH.format("photo-1521737852577-6848d4239332")],
        "external_links": {"live": "#"},
        "download_links": {},
        "results": [],
    },
    {
        "category": "Software development",
        "title": "Web Services & System Management",
        "description": (
            "Handling system development for a construction entrepreneur, focusing on "
            "customer retention and company management through our technology."
        ),
        "full_description": None,
        "client": {
            "name": "Total Builders",
            "logo": "",
            "industry": "Construction",
            "location": "Kigali, Rwanda",
        },
        "date": "2024",
        "duration": "Ongoing",
        "team": ["Full-Stack Developer", "Project Manager"],
        "tags": ["Web Development", "System Management", "CRM"],
        "features": [
            "Customer management portal",
            "Project tracking system",
            "Automated reporting",
        ],
        "images": [_UNSPLASH.format("photo-1541888946425-d81bb19240f5")],
        "external_links": {"live": "#"},
        "download_links": {},
        "results": [],
    },
]


def seed_database() -> dict[str, int]:
    """Insert missing seed services and projects.

    Returns:
        Number of rows created per table.
    """
    created = {"services": 0, "projects": 0}
    with get_session() as session:
        existing_services = {title for (title,) in session.query(Service.title).all()}
        for data in SEED_SERVICES:
            if data["title"] in existing_services:
                logger.debug("Service already exists: %s", data["title"])
                continue
            session.add(Service(**data))
            created["services"] += 1

        existing_projects = {title for (title,) in session.query(Project.title).all()}
        for data in SEED_PROJECTS:
            if data["title"] in existing_projects:
                continue
            session.add(Project(**data))
            created["projects"] += 1

    logger.info(
        "Seeded %d services and %d projects", created["services"], created["projects"]
    )
    return created
