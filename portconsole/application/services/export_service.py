"""Export service - writes the scrollback to a text file."""

import logging
import os
import stat
import tempfile
from collections.abc import Sequence
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from portconsole.domain import ExportIOError

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\r\n"


@dataclass(frozen=True)
class ExportResult:
    """Result of an export attempt."""

    success: bool
    path: Path | None = None
    reason: str | None = None


class ExportService:
    """Service for exporting console lines.

    Each line is written followed by CR LF, encoded as UTF-8. The file
    is first written next to the target and then moved into place, so
    a failed export never leaves a partial file behind.
    """

    def export(self, lines: Sequence[str], path: Path | str) -> ExportResult:
        """Write lines to ``path``.

        Returns:
            ExportResult with success flag, or the failure reason.
        """
        if not lines:
            return ExportResult(success=False, reason="Nothing to export")

        target = Path(path)
        try:
            self._write_atomic(target, self.render(lines))
        except ExportIOError as e:
            logger.warning("Export failed path=%s: %s", target, e)
            return ExportResult(success=False, path=target, reason=str(e))

        logger.info("Exported lines=%d path=%s", len(lines), target)
        return ExportResult(success=True, path=target)

    @staticmethod
    def render(lines: Sequence[str]) -> bytes:
        """Encode lines the way they are written to disk."""
        return "".join(line + LINE_TERMINATOR for line in lines).encode("utf-8")

    def _write_atomic(self, target: Path, data: bytes) -> None:
        """Write data to a temporary sibling file, then replace the target."""
        tmp_path: str | None = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(tmp_path, _target_mode(target))
            os.replace(tmp_path, target)
            tmp_path = None
        except OSError as e:
            raise ExportIOError(e.strerror or str(e), {"path": str(target)}) from e
        finally:
            if tmp_path is not None:
                with suppress(OSError):
                    os.unlink(tmp_path)


def _target_mode(target: Path) -> int:
    """Permission bits for the exported file.

    An existing file keeps its mode; a new one gets what ``open`` would
    give it under the current umask, not the 0600 of a temporary file.
    """
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
