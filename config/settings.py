import os
from typing import Dict, Any


def get_app_config() -> Dict[str, Any]:
    """Get application configuration from environment variables"""
    return {
        "debug": os.getenv("DEBUG", "False").lower() == "true",
        "log_level": os.getenv("LOG_LEVEL", "WARNING").upper(),
        "program": os.getenv("DEMO_PROGRAM", "all"),
    }
