from bundlerer.details.project import Project
from bundlerer.mappers import ResourcesProjectMapper


def validate_main(project: Project, mapper: ResourcesProjectMapper, command_args: list[str]) -> int:
    assert not command_args
    mapped_project, _ = mapper.map(project)
    names = set(mapped_project.target_names)
    errors = 0
    for target in mapped_project.targets:
        print(f"{mapped_project.name}:{target.name}")
        for dep in target.dependencies:
            if dep.name in names:
                print(f"  {mapped_project.name}:{dep.name}")
            else:
                print(f"  {mapped_project.name}:{dep.name} (missing)")
                errors += 1
    return 1 if errors else 0
