from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Tuple

from bundlerer.config import ProjectOptions
from bundlerer.details.targets.target import Target

DERIVED_DIRECTORY = "Derived"
DERIVED_SOURCES_DIRECTORY = "Sources"


@dataclass(frozen=True)
class Project:
    name: str
    path: Path
    options: ProjectOptions = field(default_factory=ProjectOptions)
    targets: Tuple[Target, ...] = ()

    def with_targets(self, targets) -> "Project":
        return replace(self, targets=tuple(targets))

    # Shared by all targets of the project, generated file names carry the
    # target name.
    @property
    def derived_directory_path(self) -> Path:
        return self.path.joinpath(DERIVED_DIRECTORY)

    @property
    def derived_sources_path(self) -> Path:
        return self.derived_directory_path.joinpath(DERIVED_SOURCES_DIRECTORY)

    @property
    def target_names(self) -> Tuple[str, ...]:
        return tuple(t.name for t in self.targets)
