"""Configuration and environment loading for dwrgen."""

from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv


def load_env(base_path: Optional[Path] = None) -> bool:
    """Load environment variables from a .env file.

    Args:
        base_path: Project root to look in. Defaults to cwd.

    Returns:
        True if a .env file was found and loaded, False otherwise.
    """
    if base_path is None:
        base_path = Path.cwd()

    env_file = base_path / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        return True

    return False


# dwrgen configuration constants
CONFIG_FILE = "dwrgen.json"
DEFAULT_MANIFEST = "target/dwrgen/manifest.jsonl"
DEFAULT_OUTPUT_DIR = "src/main/ts/src/generated"

# Generated output units (always fully regenerated)
ENTITIES_FILE = "entities.ts"
SERVICES_FILE = "services.ts"
SERVICES_WRAPPER_FILE = "services-wrapper.ts"
MODULE_FILE = "generated.module.ts"
OUTPUT_FILES = (ENTITIES_FILE, SERVICES_FILE, SERVICES_WRAPPER_FILE, MODULE_FILE)

# Target-language renderings
UNTYPED = "any"
FILE_INPUT_TYPE = "HTMLInputElement"  # FileTransfer is bound to input[type="file"]

# Support types declared by the models preamble, always imported by services
SUPPORT_IMPORTS = (
    "Sort",
    "SortOrder",
    "SortDirection",
    "NullHandling",
    "PageRequest",
    "Page",
    "Pageable",
)

# Wrappers whose first type argument is the real-time element type
PAGE_WRAPPER_TYPES = (
    "org.springframework.data.domain.Page",
    "org.springframework.data.domain.Slice",
)

# Environment overrides
ENV_SKIP = "DWRGEN_SKIP"
ENV_OUTPUT_DIR = "DWRGEN_OUTPUT_DIR"


def get_config_path(base_path: Optional[Path] = None) -> Path:
    """Get the dwrgen.json path.

    Args:
        base_path: Project root. If None, uses current working directory.

    Returns:
        Path to the config file (which may not exist).
    """
    if base_path is None:
        base_path = Path.cwd()
    return base_path / CONFIG_FILE


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(base_path: Optional[Path] = None):
    """Load the effective configuration for a project.

    Values come from dwrgen.json when present, then environment overrides
    (optionally provided through a .env file) are applied on top.

    Args:
        base_path: Project root. Defaults to cwd.

    Returns:
        GeneratorConfig instance.
    """
    from .models import GeneratorConfig
    from .storage import read_json

    if base_path is None:
        base_path = Path.cwd()

    config_file = get_config_path(base_path)
    data = read_json(config_file) if config_file.exists() else {}

    load_env(base_path)
    if os.environ.get(ENV_SKIP):
        data["skip"] = _env_flag(os.environ[ENV_SKIP])
    if os.environ.get(ENV_OUTPUT_DIR):
        data["output_dir"] = os.environ[ENV_OUTPUT_DIR]

    return GeneratorConfig.model_validate(data)
