from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from bundlerer.config import ProjectOptions
from bundlerer.details.glob_filter import glob_with_exclusions
from bundlerer.details.product import Destination, Product
from bundlerer.details.project import Project
from bundlerer.details.targets.target import (
    CopyFilesAction,
    CoreDataModel,
    DeploymentTargets,
    ResourceFileElement,
    Settings,
    SourceFile,
    Target,
    TargetDependency,
)

DependencySpec = Union[str, TargetDependency]


class ProjectContext:
    FILENAME = "PROJECT.bundlerer"
    MODULENAME = "project"

    def __init__(self, root: Path):
        self.root = root
        self.name: Optional[str] = None
        self.options = ProjectOptions()
        self.targets: Dict[str, Target] = {}

    def set_project(self, name: str, **kwargs):
        if self.name is not None:
            raise RuntimeError(f"project has already been declared as '{self.name}'")
        self.name = name
        self.options = ProjectOptions(**kwargs)

    def add_target(
        self,
        *,
        name: str,
        product: str,
        bundle_id: str,
        destinations: Sequence[str] = ("iphone",),
        deployment_targets: Dict[str, str] = {},
        sources: Sequence[str] = [],
        resources: Sequence[str] = [],
        copy_files: Sequence[CopyFilesAction] = [],
        core_data_models: Sequence[str] = [],
        settings: Dict[str, str] = {},
        configurations: Dict[str, Dict[str, str]] = {},
        dependencies: Sequence[DependencySpec] = [],
        files_group: Optional[str] = None,
    ):
        if name in self.targets:
            raise ValueError(f"target with name='{name}' already exists in project")
        self.targets[name] = Target(
            name=name,
            product=Product(product),
            bundle_id=bundle_id,
            destinations=frozenset(Destination(d) for d in destinations),
            deployment_targets=DeploymentTargets(**deployment_targets),
            sources=tuple(SourceFile(p) for p in self._glob(sources)),
            resources=tuple(ResourceFileElement(p) for p in self._glob(resources)),
            copy_files=tuple(copy_files),
            core_data_models=tuple(CoreDataModel(p) for p in self._glob(core_data_models)),
            settings=Settings(base=dict(settings), configurations=dict(configurations)),
            dependencies=tuple(_as_dependency(d) for d in dependencies),
            files_group=files_group,
        )

    def project(self) -> Project:
        if self.name is None:
            raise RuntimeError(
                f"{self.root.joinpath(self.FILENAME)} does not declare a project, call CTX.set_project()"
            )
        return Project(
            name=self.name,
            path=self.root,
            options=self.options,
            targets=tuple(self.targets.values()),
        )

    def _glob(self, patterns: Iterable[str]) -> List[Path]:
        return glob_with_exclusions(self.root, list(patterns))


def _as_dependency(dependency: DependencySpec) -> TargetDependency:
    if isinstance(dependency, TargetDependency):
        return dependency
    return TargetDependency(name=dependency)

