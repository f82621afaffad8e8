from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Offering:
    id: str
    title: str
    description: str
    duration: str  # free text, e.g. "1 hour", "2-4 weeks"
    price: str  # free text, e.g. "Starting at $199"


@dataclass(frozen=True)
class ServiceCategory:
    id: str
    title: str
    description: str
    offerings: tuple[Offering, ...]
    price: str  # headline price label for the whole category


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: int
    category: str
    description: str = ""
    image: str | None = None
