"""Filesystem uploader for addon file uploads."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import mimetypes
from pathlib import Path
from typing import Protocol

from ..canonical.entities import FileEntry
from ..sanitize import sanitize_file_name
from .paths import PathRewriter, UploadDir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    file: str | None = None
    url: str | None = None
    content_type: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return not self.error and bool(self.file)


class Uploader(Protocol):
    def store(self, file_entry: FileEntry, path_rewriter: PathRewriter | None = None) -> UploadResult: ...


class LocalUploader:
    """Writes uploads below ``base_dir`` and reports them under ``base_url``.

    ``subdir`` plays the role of a dated folder; a path rewriter may replace
    it before the file is written.
    """

    def __init__(
        self,
        base_dir: str | Path,
        base_url: str,
        *,
        subdir: str = "",
        allowed_extensions: tuple[str, ...] = (),
    ) -> None:
        self.base_dir = str(base_dir).rstrip("/")
        self.base_url = base_url.rstrip("/")
        self.subdir = subdir
        self.allowed_extensions = tuple(ext.lower().lstrip(".") for ext in allowed_extensions)

    def upload_dir(self) -> UploadDir:
        return UploadDir(
            path=f"{self.base_dir}{self.subdir}",
            url=f"{self.base_url}{self.subdir}",
            subdir=self.subdir,
            basedir=self.base_dir,
            baseurl=self.base_url,
        )

    def store(self, file_entry: FileEntry, path_rewriter: PathRewriter | None = None) -> UploadResult:
        file_name = sanitize_file_name(file_entry.name)
        extension = Path(file_name).suffix.lower().lstrip(".")
        if self.allowed_extensions and extension not in self.allowed_extensions:
            return UploadResult(error="Sorry, this file type is not permitted for security reasons.")

        target = self.upload_dir()
        if path_rewriter is not None:
            target = path_rewriter(target)

        directory = Path(target.path)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            destination = _unique_path(directory, file_name)
            with destination.open("xb") as handle:
                handle.write(file_entry.content)
        except OSError as exc:
            logger.debug("Upload of %s to %s failed: %s", file_name, directory, exc)
            return UploadResult(error=f"The uploaded file could not be moved to {target.path}.")

        content_type = file_entry.content_type or mimetypes.guess_type(destination.name)[0]
        return UploadResult(
            file=str(destination),
            url=f"{target.url}/{destination.name}",
            content_type=content_type,
        )


def _unique_path(directory: Path, file_name: str) -> Path:
    candidate = directory / file_name
    stem = candidate.stem
    suffix = candidate.suffix
    number = 1
    while candidate.exists():
        candidate = directory / f"{stem}-{number}{suffix}"
        number += 1
    return candidate


__all__ = ["LocalUploader", "UploadResult", "Uploader"]
