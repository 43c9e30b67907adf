"""OrgChart configuration — paths, constants, and defaults."""

from pathlib import Path

# Base directories
PROJECT_ROOT = Path(__file__).resolve().parent.parent
COMPANY_DIR = PROJECT_ROOT / "company"

# Data paths
ORG_YAML_PATH = COMPANY_DIR / "org.yaml"

# Chart used when no org file exists
DEFAULT_CEO_ID = 1
DEFAULT_CEO_NAME = "John Smith"

# History record kinds
MOVE = "move"
