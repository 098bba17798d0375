# Руководство к файлу (html2pdf/export/writer.py)
# Назначение:
# - Атомарная запись PDF: временный файл в той же директории -> fsync -> os.replace.
# Важно:
# - При любой ошибке временный файл удаляется, итоговый путь не трогается,
#   поэтому обрыв процесса не оставляет «обрезанный» PDF.
# - Существующий файл перезаписывается без вопросов.

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from html2pdf.core.errors import IoError


logger = logging.getLogger(__name__)


def _current_umask() -> int:
    # узнать umask можно только установив новый
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_atomic(path: Path, data: bytes) -> Path:
    """Пишет байты в `path` атомарно и возвращает путь."""

    directory = path.parent
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
    except OSError as exc:
        raise IoError(f"Cannot create temporary file in {directory}: {exc}") from exc

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp создаёт файл с правами 0600; выставляем как у обычного open()
        os.chmod(tmp, 0o666 & ~_current_umask())
        os.replace(tmp, path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise IoError(f"Cannot write output file {path}: {exc}") from exc
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


__all__ = ["write_atomic"]
