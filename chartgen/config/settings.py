"""Runtime configuration for the chart pipeline, image client and web app."""

import os
from pathlib import Path

from loguru import logger

# Load environment variables from .env file if it exists
try:
    from dotenv import load_dotenv

    # Look for .env in the project root, then the current working directory
    project_env = Path(__file__).parent.parent.parent / ".env"
    cwd_env = Path.cwd() / ".env"

    env_loaded = False
    for env_path in [project_env, cwd_env]:
        if env_path.exists():
            load_dotenv(env_path)
            logger.debug(f"Loaded environment variables from {env_path}")
            env_loaded = True
            break

    if not env_loaded:
        load_dotenv()
except Exception as e:
    logger.warning(f"Could not load .env file: {e}")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


# Image generation (Google Generative Language API)
IMAGEGEN_CONFIG = {
    "api_key": os.getenv("GOOGLE_GENERATIVE_AI_API_KEY"),
    "base_url": os.getenv(
        "IMAGEGEN_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    ),
    "primary_model": os.getenv("IMAGEGEN_PRIMARY_MODEL", "gemini-2.0-flash-exp"),
    "fallback_model": os.getenv("IMAGEGEN_FALLBACK_MODEL", "imagen-3.0-generate-002"),
    "timeout_seconds": float(os.getenv("IMAGEGEN_TIMEOUT", "60.0")),
    # Characters of pasted data quoted in the fallback prompt
    "fallback_prompt_chars": int(os.getenv("IMAGEGEN_FALLBACK_PROMPT_CHARS", "200")),
}

# Parse -> infer -> render pipeline
PIPELINE_CONFIG = {
    "cache_enabled": _env_flag("CHART_CACHE_ENABLED", "true"),
    "max_cache_entries": int(os.getenv("CHART_CACHE_MAX_ENTRIES", "128")),
    "skip_blank_lines": _env_flag("CSV_SKIP_BLANK_LINES", "false"),
}

# Flask web app
FLASK_CONFIG = {
    "port": int(os.getenv("FLASK_PORT", "5007")),
    "debug": _env_flag("FLASK_DEBUG", "false"),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
}
