# Resources project mapper.
#
# Gives targets that can't embed resources (static libraries and friends) a
# companion bundle target holding those resources, and adds generated Swift
# and Objective-C accessors so code can find its bundle at runtime. Mapping is
# pure: the filesystem writes needed for the generated sources are returned as
# side effect descriptors.

import logging
import os

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from bundlerer.conditional import PlatformCondition
from bundlerer.details.content_hasher import ContentHasher
from bundlerer.details.product import Product
from bundlerer.details.project import Project
from bundlerer.details.side_effects import SideEffectDescriptor
from bundlerer.details.targets.target import (
    InfoPlist,
    Settings,
    SourceFile,
    Target,
    TargetDependency,
)
from bundlerer.errors import (
    BundleNameCollisionError,
    ContentHashingError,
    GeneratedFileCollisionError,
)
from bundlerer.generators.accessors import (
    accessor_file_name,
    objc_header_file_content,
    objc_implementation_file_content,
    sanitized_bundle_name,
    swift_file_content,
)

logger = logging.getLogger(__name__)

PREFIX_HEADER_SETTING = "GCC_PREFIX_HEADER"
CODE_SIGNING_SETTING = "CODE_SIGNING_ALLOWED"
RESOURCES_BUNDLE_ID_SUFFIX = ".resources"

TargetMapping = Tuple[List[Target], List[SideEffectDescriptor]]


class ResourcesProjectMapper:
    def __init__(self, content_hasher: ContentHasher, jobs: Optional[int] = None):
        self.content_hasher = content_hasher
        self.jobs = jobs

    def map(self, project: Project) -> Tuple[Project, List[SideEffectDescriptor]]:
        if project.options.disable_bundle_accessors:
            return project, []
        logger.debug(f"Transforming project {project.name}: generating bundles for libraries")

        if self.jobs and self.jobs > 1:
            # executor.map yields in submission order, the first failing target
            # raises here and aborts the whole pass.
            with ThreadPoolExecutor(max_workers=self.jobs) as executor:
                results = list(
                    executor.map(lambda t: self.map_target(t, project), project.targets)
                )
        else:
            results = [self.map_target(t, project) for t in project.targets]

        targets: List[Target] = []
        side_effects: List[SideEffectDescriptor] = []
        owners: Dict[Path, str] = {}
        for target, (mapped_targets, target_side_effects) in zip(project.targets, results):
            for side_effect in target_side_effects:
                path = side_effect.file.path
                if owners.setdefault(path, target.name) != target.name:
                    raise GeneratedFileCollisionError(
                        path.as_posix(), [owners[path], target.name]
                    )
            targets.extend(mapped_targets)
            side_effects.extend(target_side_effects)
        return project.with_targets(targets), side_effects

    def map_target(self, target: Target, project: Project) -> TargetMapping:
        if not target.resources and not target.core_data_models:
            return [target], []

        bundle_name = f"{project.name}_{target.name}"
        modified_target = target
        additional_targets: List[Target] = []
        side_effects: List[SideEffectDescriptor] = []

        if not target.supports_resources:
            if bundle_name in project.target_names:
                raise BundleNameCollisionError(bundle_name, target.name, project.name)
            logger.debug(f"Moving resources of {target.name} into bundle {bundle_name}")
            additional_targets.append(self._resources_target(bundle_name, target))
            dependency = TargetDependency(
                name=bundle_name,
                condition=PlatformCondition.when(target.dependency_platform_filters),
            )
            modified_target = replace(
                modified_target,
                resources=(),
                copy_files=(),
                dependencies=modified_target.dependencies + (dependency,),
            )

        if target.supports_sources and target.contains_swift_files:
            path = project.derived_sources_path.joinpath(
                accessor_file_name(target.name, "swift")
            )
            content = swift_file_content(
                target_name=target.name,
                bundle_name=sanitized_bundle_name(bundle_name),
                target=target,
            )
            source_file, side_effect = self._synthesized_file(path, content)
            modified_target = replace(
                modified_target, sources=modified_target.sources + (source_file,)
            )
            side_effects.append(side_effect)

        if (
            project.options.bundle_accessors.include_objc_accessor
            and target.supports_sources
            and target.contains_objc_files
            and target.contains_bundle_accessed_resources
        ):
            sources_path = project.derived_sources_path
            header_path = sources_path.joinpath(accessor_file_name(target.name, "h"))
            implementation_path = sources_path.joinpath(accessor_file_name(target.name, "m"))
            header_file, header_side_effect = self._synthesized_file(
                header_path,
                objc_header_file_content(target_name=target.name, project_name=project.name),
            )
            implementation_file, implementation_side_effect = self._synthesized_file(
                implementation_path,
                objc_implementation_file_content(
                    target_name=target.name,
                    bundle_name=sanitized_bundle_name(bundle_name),
                    project_name=project.name,
                    header_file_name=header_path.name,
                ),
            )
            prefix_header = "$(SRCROOT)/" + Path(
                os.path.relpath(header_path, project.path)
            ).as_posix()
            base = dict(modified_target.settings.base)
            base[PREFIX_HEADER_SETTING] = prefix_header
            modified_target = replace(
                modified_target,
                sources=modified_target.sources + (implementation_file,),
                settings=modified_target.settings.with_base(base),
            )
            side_effects.extend([header_side_effect, implementation_side_effect])

        return [modified_target, *additional_targets], side_effects

    def _resources_target(self, bundle_name: str, target: Target) -> Target:
        return Target(
            name=bundle_name,
            product=Product.BUNDLE,
            bundle_id=f"{target.bundle_id}{RESOURCES_BUNDLE_ID_SUFFIX}",
            destinations=target.destinations,
            deployment_targets=target.deployment_targets,
            info_plist=InfoPlist.extending_default({}),
            settings=Settings(base={CODE_SIGNING_SETTING: "NO"}),
            resources=target.resources,
            copy_files=target.copy_files,
            core_data_models=target.core_data_models,
            files_group=target.files_group,
        )

    def _synthesized_file(
        self, path: Path, content: str
    ) -> Tuple[SourceFile, SideEffectDescriptor]:
        try:
            data = content.encode("utf-8")
            content_hash = self.content_hasher.hash(data)
        except Exception as e:
            raise ContentHashingError(path.as_posix(), str(e)) from e
        return (
            SourceFile(path=path, content_hash=content_hash),
            SideEffectDescriptor.write(path, data),
        )
