from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

# Tests run against the in-memory ledger only.
PERSISTENCE_ENABLED = False
SYNC_INLINE = True
TIMEZONE = "UTC"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
