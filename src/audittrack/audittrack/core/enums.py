from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Rôle d'un collaborateur (détermine la visibilité des saisies)."""

    ADMIN = "Admin"
    COLLABORATOR = "Collaborateur"

    @classmethod
    def parse(cls, value) -> "UserRole":
        try:
            return cls(value)
        except ValueError:
            return cls.COLLABORATOR


class ServiceType(str, Enum):
    """Pôle métier, partagé entre départements et dossiers."""

    AUDIT = "Audit"
    EXPERTISE = "Expertise Comptable"
    SOCIAL = "Social"
    JURIDIQUE = "Juridique"
    FISCAL = "Fiscal"
    CONSEIL = "Conseil"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"


class View(str, Enum):
    LOG = "log"
    DASHBOARD = "dashboard"
    ENTRIES = "entries"
    COLLABS = "collabs"
    FOLDERS = "folders"
    SETTINGS = "settings"


class Collection(str, Enum):
    """Entity collections; values are the remote table names."""

    PEOPLE = "collaborators"
    FOLDERS = "folders"
    ENTRIES = "time_entries"
