from bundlerer.details.project import Project
from bundlerer.details.side_effect_executor import SideEffectExecutor
from bundlerer.mappers import ResourcesProjectMapper


def print_targets(project: Project):
    print(f"{project.name} : {len(project.targets)} targets")
    for target in project.targets:
        print(f"  {target.name} ({target.product.value})")
        print(f"    sources   : {len(target.sources)}")
        print(f"    resources : {len(target.resources)}")
        for dep in target.dependencies:
            condition = f" [{dep.condition}]" if dep.condition else ""
            print(f"    -> {dep.name}{condition}")


def map_main(project: Project, mapper: ResourcesProjectMapper, command_args: list[str]):
    assert not command_args
    mapped_project, side_effects = mapper.map(project)
    print_targets(mapped_project)
    changes = SideEffectExecutor(dry_run=True).apply(side_effects)
    if changes:
        print()
    for change in changes:
        print(change)
