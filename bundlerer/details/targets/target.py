# Target model.
#
# Targets and everything they hold are frozen values. Transformations build
# new values with dataclasses.replace() instead of mutating in place, so a
# target that passes through a mapper untouched is the very same object.

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import PurePath
from typing import Dict, FrozenSet, Optional, Tuple

from bundlerer.conditional import PlatformCondition
from bundlerer.details.product import Destination, Product

SettingsDictionary = Dict[str, str]

SWIFT_EXTENSIONS = frozenset({".swift"})
OBJC_EXTENSIONS = frozenset({".m", ".mm"})
PRIVACY_MANIFEST_EXTENSION = ".xcprivacy"


@dataclass(frozen=True)
class SourceFile:
    path: PurePath
    content_hash: Optional[str] = None  # only set for generated files


@dataclass(frozen=True)
class ResourceFileElement:
    path: PurePath

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()


@dataclass(frozen=True)
class CopyFilesAction:
    name: str
    destination: str  # e.g. "resources", "frameworks", "plugins"
    files: Tuple[PurePath, ...] = ()
    sub_path: Optional[str] = None


@dataclass(frozen=True)
class CoreDataModel:
    path: PurePath
    versions: Tuple[PurePath, ...] = ()
    current_version: Optional[str] = None


class InfoPlistKind(Enum):
    DEFAULT = "default"
    EXTENDING_DEFAULT = "extending_default"
    FILE = "file"


@dataclass(frozen=True)
class InfoPlist:
    kind: InfoPlistKind = InfoPlistKind.DEFAULT
    extensions: Dict[str, str] = field(default_factory=dict)
    path: Optional[PurePath] = None

    @staticmethod
    def extending_default(extensions: Dict[str, str]) -> "InfoPlist":
        return InfoPlist(kind=InfoPlistKind.EXTENDING_DEFAULT, extensions=dict(extensions))


@dataclass(frozen=True)
class DeploymentTargets:
    ios: Optional[str] = None
    macos: Optional[str] = None
    watchos: Optional[str] = None
    tvos: Optional[str] = None
    visionos: Optional[str] = None


@dataclass(frozen=True)
class Settings:
    base: SettingsDictionary = field(default_factory=dict)
    configurations: Dict[str, SettingsDictionary] = field(default_factory=dict)

    def with_base(self, base: SettingsDictionary) -> "Settings":
        return replace(self, base=dict(base))


@dataclass(frozen=True)
class TargetDependency:
    name: str
    condition: Optional[PlatformCondition] = None


@dataclass(frozen=True)
class Target:
    name: str
    product: Product
    bundle_id: str
    destinations: FrozenSet[Destination] = frozenset({Destination.IPHONE})
    deployment_targets: DeploymentTargets = DeploymentTargets()
    product_name: Optional[str] = None
    info_plist: InfoPlist = InfoPlist()
    sources: Tuple[SourceFile, ...] = ()
    resources: Tuple[ResourceFileElement, ...] = ()
    copy_files: Tuple[CopyFilesAction, ...] = ()
    core_data_models: Tuple[CoreDataModel, ...] = ()
    settings: Settings = Settings()
    dependencies: Tuple[TargetDependency, ...] = ()
    files_group: Optional[str] = None

    @property
    def supports_resources(self) -> bool:
        return self.product.supports_resources

    @property
    def supports_sources(self) -> bool:
        # Bundles only compile code when they are loaded by a macOS process.
        if self.product is Product.BUNDLE:
            return Destination.MAC in self.destinations
        return self.product.supports_sources

    @property
    def dependency_platform_filters(self) -> FrozenSet[str]:
        return frozenset(d.platform_filter for d in self.destinations)

    @property
    def contains_swift_files(self) -> bool:
        return any(s.path.suffix in SWIFT_EXTENSIONS for s in self.sources)

    @property
    def contains_objc_files(self) -> bool:
        return any(s.path.suffix in OBJC_EXTENSIONS for s in self.sources)

    # Resources that code reaches through the bundle accessor. The privacy
    # manifest is read by the OS, never by the target's own code.
    @property
    def contains_bundle_accessed_resources(self) -> bool:
        return any(r.extension != PRIVACY_MANIFEST_EXTENSION for r in self.resources)
