# src/directory/seed.py — v1
"""Built-in seed directory (DIRECTORY_BACKEND=seed).

The demo professionals and the category strip shown on the search screen.
"""

from __future__ import annotations

from fixerhub.core.models import CategoryRecord, ProfessionalRecord
from fixerhub.directory.base_directory_source import BaseDirectorySource

_PEXELS = "https://images.pexels.com/photos/{id}/pexels-photo-{id}.jpeg?auto=compress&cs=tinysrgb&w=150"

SEED_CATEGORIES: tuple[CategoryRecord, ...] = (
    CategoryRecord(id=1, name="Electrical", icon="zap", color="#EAB308"),
    CategoryRecord(id=2, name="Plumbing", icon="droplets", color="#3B82F6"),
    CategoryRecord(id=3, name="Repair", icon="wrench", color="#6B7280"),
    CategoryRecord(id=4, name="Beauty", icon="scissors", color="#EC4899"),
    CategoryRecord(id=5, name="Cleaning", icon="sparkles", color="#10B981"),
    CategoryRecord(id=6, name="Home", icon="home", color="#F59E0B"),
    CategoryRecord(id=7, name="Automotive", icon="car", color="#EF4444"),
    CategoryRecord(id=8, name="Tech", icon="smartphone", color="#8B5CF6"),
)

SEED_PROFESSIONALS: tuple[ProfessionalRecord, ...] = (
    ProfessionalRecord(
        id="1",
        name="John Smith",
        profession="Electrician",
        rating=4.8,
        review_count=156,
        price=75,
        distance=0.8,
        verified=True,
        services=("Fix Light Switch", "Install Ceiling Fan", "Electrical Outlet Repair"),
        image_url=_PEXELS.format(id=1043471),
    ),
    ProfessionalRecord(
        id="2",
        name="Sarah Johnson",
        profession="Plumber",
        rating=4.9,
        review_count=203,
        price=85,
        distance=1.2,
        verified=True,
        services=("Leak Repair", "Drain Cleaning", "Toilet Installation"),
        image_url=_PEXELS.format(id=1181686),
    ),
    ProfessionalRecord(
        id="3",
        name="Mike Wilson",
        profession="Repair Technician",
        rating=4.7,
        review_count=89,
        price=65,
        distance=2.1,
        verified=True,
        services=("Appliance Repair", "Furniture Repair", "General Maintenance"),
        image_url=_PEXELS.format(id=1222271),
    ),
    ProfessionalRecord(
        id="4",
        name="Emma Davis",
        profession="House Cleaner",
        rating=4.9,
        review_count=134,
        price=45,
        distance=1.5,
        verified=True,
        services=("Deep Cleaning", "Regular Cleaning", "Move-out Cleaning"),
        image_url=_PEXELS.format(id=1239291),
    ),
)


class SeedDirectorySource(BaseDirectorySource):
    """Serves the built-in demo directory."""

    def professionals(self) -> tuple[ProfessionalRecord, ...]:
        return SEED_PROFESSIONALS

    def categories(self) -> tuple[CategoryRecord, ...]:
        return SEED_CATEGORIES
