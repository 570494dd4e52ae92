# Side effect descriptors.
#
# Mappers never touch the filesystem, they describe the state they need and
# leave applying it to SideEffectExecutor. This keeps mapping runs usable for
# dry runs and for diffing against what is already on disk.

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class FileState(Enum):
    PRESENT = "present"
    ABSENT = "absent"


@dataclass(frozen=True)
class FileDescriptor:
    path: Path
    contents: Optional[bytes] = None
    state: FileState = FileState.PRESENT


@dataclass(frozen=True)
class SideEffectDescriptor:
    file: FileDescriptor

    @staticmethod
    def write(path: Path, contents: bytes) -> "SideEffectDescriptor":
        return SideEffectDescriptor(FileDescriptor(path=path, contents=contents))

    @staticmethod
    def remove(path: Path) -> "SideEffectDescriptor":
        return SideEffectDescriptor(FileDescriptor(path=path, state=FileState.ABSENT))

    def __str__(self):
        return f"{self.file.state.value} {self.file.path.as_posix()}"
