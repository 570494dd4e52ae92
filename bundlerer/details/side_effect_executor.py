import logging
import os

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Iterable, List, Optional

from bundlerer.details.content_hasher import Blake2bContentHasher, ContentHasher
from bundlerer.details.side_effects import FileState, SideEffectDescriptor

logger = logging.getLogger(__name__)


class FileAction(Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class FileChange:
    path: Path
    action: FileAction

    def __str__(self):
        return f"{self.action.value:<9} {self.path.as_posix()}"


class SideEffectExecutor:
    def __init__(
        self, dry_run: bool = False, content_hasher: Optional[ContentHasher] = None
    ):
        self.dry_run = dry_run
        self.content_hasher = content_hasher or Blake2bContentHasher()

    def apply(self, side_effects: Iterable[SideEffectDescriptor]) -> List[FileChange]:
        changes = [self._apply_one(side_effect) for side_effect in side_effects]
        if not self.dry_run:
            updated = sum(1 for c in changes if c.action is not FileAction.UNCHANGED)
            logger.debug(f"Applied {len(changes)} side effects, {updated} changed files")
        return changes

    def plan(self, side_effects: Iterable[SideEffectDescriptor]) -> List[FileChange]:
        return SideEffectExecutor(dry_run=True, content_hasher=self.content_hasher).apply(
            side_effects
        )

    def _apply_one(self, side_effect: SideEffectDescriptor) -> FileChange:
        descriptor = side_effect.file
        path = Path(descriptor.path)
        if descriptor.state is FileState.ABSENT:
            if not path.exists():
                return FileChange(path, FileAction.UNCHANGED)
            if not self.dry_run:
                logger.debug(f"removing {path}")
                path.unlink()
            return FileChange(path, FileAction.DELETE)

        contents = descriptor.contents or b""
        if path.is_file():
            if self._same_contents(path, contents):
                return FileChange(path, FileAction.UNCHANGED)
            action = FileAction.UPDATE
        else:
            action = FileAction.CREATE
        if not self.dry_run:
            logger.debug(f"writing {path}")
            self._write(path, contents)
        return FileChange(path, action)

    def _same_contents(self, path: Path, contents: bytes) -> bool:
        return self.content_hasher.hash(path.read_bytes()) == self.content_hasher.hash(
            contents
        )

    # Written to a temporary file in the same directory, then renamed into place.
    # The file gets the permissions a plain open() would give it under the
    # current umask, and the temporary is removed if anything fails.
    def _write(self, path: Path, contents: bytes):
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = NamedTemporaryFile(dir=str(path.parent), delete=False)
        try:
            with tmp:
                tmp.write(contents)
            os.chmod(tmp.name, 0o666 & ~_current_umask())
            Path(tmp.name).replace(path)
        except BaseException:
            Path(tmp.name).unlink(missing_ok=True)
            raise


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask
