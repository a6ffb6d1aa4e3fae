"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

from .enums import Collection, ServiceType, UserRole

LOCAL_KEYS = {
    Collection.ENTRIES: "audittrack_v5_entries",
    Collection.PEOPLE: "audittrack_v5_collabs",
    Collection.FOLDERS: "audittrack_v5_folders",
}
USER_ID_KEY = "audittrack_v5_userid"
CLOUD_CONFIG_KEY = "audittrack_cloud_config"
NOTIFICATIONS_KEY = "audittrack_notifications"

LINK_PREFIX = "cloud:"
MAX_NOTIFICATIONS = 3

# Column order per table, shared by the MySQL gateway and the schema.
COLUMNS = {
    Collection.PEOPLE: ("id", "name", "department", "hiringDate", "role"),
    Collection.FOLDERS: ("id", "name", "number", "clientName", "serviceType", "budgetHours"),
    Collection.ENTRIES: (
        "id",
        "collaboratorId",
        "collaboratorName",
        "service",
        "folderId",
        "folderName",
        "folderNumber",
        "duration",
        "description",
        "date",
    ),
}

# Foreign keys that cascade on delete: parent collection -> (child collection, column)
CASCADES = {
    Collection.PEOPLE: (Collection.ENTRIES, "collaboratorId"),
    Collection.FOLDERS: (Collection.ENTRIES, "folderId"),
}

DEFAULT_ADMIN = {
    "id": "admin-1",
    "name": "Manager Cabinet",
    "department": ServiceType.AUDIT.value,
    "hiringDate": "2025-01-01",
    "role": UserRole.ADMIN.value,
}

ID_PREFIXES = {
    Collection.PEOPLE: "c",
    Collection.FOLDERS: "f",
    Collection.ENTRIES: "entry",
}
