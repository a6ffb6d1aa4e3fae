import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Directory holding the local mirror (one JSON snapshot per key)
DATA_DIR = os.getenv("AUDITTRACK_DATA_DIR", "instance")

DEBUG = True

# Apply database/schema.sql to the remote store on startup when one is configured
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
