"""Runtime settings shared by the CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

# <checkout>/data for an editable install; override with --data-dir.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_DIR_ENVVAR = "KEYREPO_DATA_DIR"

INVENTORY_FILE_NAME = "inventory.json"


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path = DEFAULT_DATA_DIR
    verbose: bool = False

    @property
    def inventory_file(self) -> Path:
        return self.data_dir / INVENTORY_FILE_NAME

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.verbose else logging.WARNING


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
