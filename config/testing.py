import os

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("AUDITTRACK_DATA_DIR", "instance-test")

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
