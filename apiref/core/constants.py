"""Core constants for apiref."""

# Environment variable prefix for SiteConfig.from_env
ENV_PREFIX = "APIREF_"

# Default base URL prefix for generated reference pages
DEFAULT_ROOT = "/reference"

# Default output directory for the CLI
DEFAULT_OUTPUT_DIR = "site"
