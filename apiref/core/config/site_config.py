"""Site configuration for apiref.

Configuration can be provided via:
- Environment variables (APIREF_*)
- CLI arguments
- Default values

CLI arguments win over environment variables, which win over defaults.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from apiref.core.constants import DEFAULT_OUTPUT_DIR, DEFAULT_ROOT, ENV_PREFIX

if TYPE_CHECKING:
    from apiref.reference.models import ReferenceContext


class SiteConfig(BaseModel):
    """Settings for one package-generation run."""

    root: str = Field(default=DEFAULT_ROOT, description="Base URL prefix for the reference site")
    package_name: str | None = Field(default=None, description="Name of the package being documented")
    category: str | None = Field(
        default=None,
        description="Navigation category label (defaults to the package name)",
    )
    output_dir: Path = Field(default=Path(DEFAULT_OUTPUT_DIR), description="Directory pages are written to")
    max_workers: int = Field(default=1, ge=1, description="Threads used to render symbols")

    @field_validator("output_dir", mode="before")
    @classmethod
    def validate_output_dir(cls, v: Any) -> Path:
        """Convert string paths to Path objects."""
        if not isinstance(v, Path):
            return Path(v)
        return v

    def is_configured(self) -> bool:
        """Check if a package name has been supplied."""
        return bool(self.package_name and self.package_name.strip())

    def to_context(self) -> ReferenceContext:
        """Build the read-only context shared by every page render.

        Raises:
            ValueError: If no package name is configured or root is invalid
        """
        from apiref.reference.models import ReferenceContext

        if not self.is_configured():
            raise ValueError("Package name not configured")
        return ReferenceContext(
            root=self.root,
            package_name=self.package_name,
            category=self.category,
        )

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add site-related CLI arguments."""
        parser.add_argument(
            "--package",
            dest="package_name",
            type=str,
            help=f"Package name used in URLs and navigation (env: {ENV_PREFIX}PACKAGE_NAME)",
        )
        parser.add_argument(
            "--root",
            type=str,
            help=f"Base URL prefix for generated pages (default: {DEFAULT_ROOT})",
        )
        parser.add_argument(
            "--category",
            type=str,
            help="Navigation category label (default: the package name)",
        )
        parser.add_argument(
            "--out-dir",
            dest="output_dir",
            type=Path,
            help=f"Output directory for generated pages (default: {DEFAULT_OUTPUT_DIR})",
        )
        parser.add_argument(
            "--workers",
            dest="max_workers",
            type=int,
            help="Number of threads used to render symbols (default: 1)",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load site config from environment variables."""
        config: dict[str, Any] = {}
        root = os.getenv(f"{ENV_PREFIX}ROOT")
        if root is not None:
            config["root"] = root
        if package_name := os.getenv(f"{ENV_PREFIX}PACKAGE_NAME"):
            config["package_name"] = package_name
        if category := os.getenv(f"{ENV_PREFIX}CATEGORY"):
            config["category"] = category
        if output_dir := os.getenv(f"{ENV_PREFIX}OUTPUT_DIR"):
            config["output_dir"] = Path(output_dir)
        if max_workers := os.getenv(f"{ENV_PREFIX}MAX_WORKERS"):
            try:
                config["max_workers"] = int(max_workers)
            except ValueError:
                logger.warning(
                    f"Ignoring non-integer {ENV_PREFIX}MAX_WORKERS={max_workers!r}"
                )
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract site config from CLI arguments."""
        overrides: dict[str, Any] = {}
        # An explicit empty --root selects root-relative URLs
        for key in ("root", "package_name", "category", "output_dir", "max_workers"):
            value = getattr(args, key, None)
            if value is not None:
                overrides[key] = value
        return overrides

    @classmethod
    def from_sources(cls, args: Any | None = None) -> SiteConfig:
        """Merge defaults, environment variables and CLI arguments."""
        values = cls.load_from_env()
        if args is not None:
            values.update(cls.extract_cli_overrides(args))
        return cls(**values)

    def __repr__(self) -> str:
        """String representation of site configuration."""
        parts = [
            f"root={self.root}",
            f"package_name={self.package_name}",
            f"output_dir={self.output_dir}",
        ]
        if self.category is not None:
            parts.append(f"category={self.category}")
        return f"SiteConfig({', '.join(parts)})"
