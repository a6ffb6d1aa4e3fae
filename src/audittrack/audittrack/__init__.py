"""AuditTrack package.

Feature modules (entries, entities, analytics, cloud, ...) sit on top of a
storage gateway that talks either to a local JSON mirror or to a shared MySQL
database. Controllers stay thin; the rules live in services and state.
"""
