from bundlerer.details.project import Project
from bundlerer.details.side_effect_executor import FileAction, SideEffectExecutor
from bundlerer.mappers import ResourcesProjectMapper


def apply_main(project: Project, mapper: ResourcesProjectMapper, command_args: list[str]):
    assert not command_args
    _, side_effects = mapper.map(project)
    changes = SideEffectExecutor().apply(side_effects)
    for change in changes:
        if change.action is not FileAction.UNCHANGED:
            print(change)
    unchanged = sum(1 for c in changes if c.action is FileAction.UNCHANGED)
    print(f"{len(changes) - unchanged} files changed, {unchanged} up to date")
