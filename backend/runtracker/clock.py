from datetime import datetime

from runtracker.core.config import settings
from runtracker.core.time_utils import local_now


# Dependency we will use in FastAPI routes; tests override it to pin "now"
def get_now() -> datetime:
    return local_now(settings.timezone)
