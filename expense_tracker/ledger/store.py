"""Mini README: JSON file persistence for the expense ledger.

Structure:
    * LedgerStore - loads and saves the whole ledger document.

Every operation round-trips the complete document. Saving writes a temporary
file beside the target and swaps it in with ``os.replace`` so readers only
ever see the previous or the new document. There is no file locking: two
processes saving at once can lose one of the updates, so the tool assumes a
single writer.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError as SchemaError

from ..logging_utils import get_logger
from .errors import StorageError
from .models import Ledger

LOGGER = get_logger(__name__)


class LedgerStore:
    """Persist a ``Ledger`` as a single JSON document on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Ledger:
        """Read the ledger, creating an empty one on first use."""

        if not self.exists():
            LOGGER.info("No ledger at %s, creating an empty one", self.path)
            ledger = Ledger()
            self.save(ledger)
            return ledger

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as error:
            LOGGER.error("Could not read ledger %s: %s", self.path, error)
            raise StorageError(f"Could not read {self.path}: {error}") from error
        except UnicodeDecodeError as error:
            raise StorageError(f"{self.path} is not UTF-8 encoded: {error}") from error

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as error:
            raise StorageError(f"{self.path} is not valid JSON: {error}") from error

        try:
            ledger = Ledger.model_validate(document)
        except SchemaError as error:
            raise StorageError(f"{self.path} is not a valid expense ledger: {error}") from error

        LOGGER.debug("Loaded %s expenses from %s", ledger.count, self.path)
        return ledger

    def save(self, ledger: Ledger) -> None:
        """Atomically replace the ledger file with ``ledger``."""

        payload = json.dumps(ledger.as_document(), indent=2, ensure_ascii=False)
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.write("\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as error:
            LOGGER.exception("Failed to save ledger %s", self.path)
            raise StorageError(f"Could not write {self.path}: {error}") from error
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        LOGGER.debug("Saved %s expenses to %s", ledger.count, self.path)
