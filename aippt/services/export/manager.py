"""
Export Manager.

Writes rendered decks into the export directory under collision-resistant
names and returns the reference callers use to download them.
"""
import logging
import os
import secrets
import string
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from aippt.core.errors import ExportError
from aippt.models.document import DocumentModel

from .pptx_writer import write_pptx

logger = logging.getLogger(__name__)

FILE_PREFIX = "aippt"
FILE_SUFFIX = ".pptx"
SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 6
MAX_NAME_ATTEMPTS = 5


@dataclass(frozen=True)
class ExportResult:
    """Reference to a published deck."""
    file_name: str
    path: Path
    url: str


def generate_file_name(now_ms: Optional[int] = None) -> str:
    """Build ``aippt_<epoch-ms>_<random>.pptx``."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{FILE_PREFIX}_{now_ms}_{suffix}{FILE_SUFFIX}"


class ExportManager:
    """
    Persists document models as .pptx files.

    The file is written under a hidden temporary name and published with a
    hard link, so readers never see a partial file and an existing export is
    never overwritten.
    """

    def __init__(
        self,
        export_dir: Path,
        url_prefix: str = "/exports",
        name_factory: Callable[[], str] = generate_file_name,
    ):
        self.export_dir = Path(export_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self._name_factory = name_factory

    def export(self, document: DocumentModel) -> ExportResult:
        """
        Write a document to the export directory.

        Raises:
            ExportError: if the file cannot be written or published
        """
        try:
            self.export_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ExportError("Export directory is not writable", details=str(e)) from e

        for _ in range(MAX_NAME_ATTEMPTS):
            file_name = self._name_factory()
            target = self.export_dir / file_name
            if target.exists():
                continue
            if self._publish(document, target):
                logger.info(f"Exported {len(document)} slides to {target}")
                return ExportResult(
                    file_name=file_name,
                    path=target,
                    url=f"{self.url_prefix}/{file_name}",
                )

        raise ExportError("Could not allocate a unique export file name")

    def _publish(self, document: DocumentModel, target: Path) -> bool:
        """Write then link into place; False if ``target`` appeared meanwhile."""
        temp = target.with_name(f".{target.name}.{secrets.token_hex(4)}.part")
        try:
            with open(temp, "wb") as fh:
                write_pptx(document, fh)
                fh.flush()
                os.fsync(fh.fileno())
            os.link(temp, target)
            return True
        except FileExistsError:
            logger.warning(f"Export name collision on {target.name}, retrying")
            return False
        except OSError as e:
            raise ExportError("Failed to write presentation file", details=str(e)) from e
        finally:
            try:
                temp.unlink()
            except FileNotFoundError:
                pass
