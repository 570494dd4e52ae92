from importlib.machinery import SourceFileLoader
from importlib.util import spec_from_loader, module_from_spec
from pathlib import Path

from bundlerer.details.context import ProjectContext
from bundlerer.details.project import Project


def load_user_module(ctx: ProjectContext):
    module_name = ".".join(["bundlerer", "workspace", *ctx.root.parts[1:], ctx.MODULENAME])
    module_path = ctx.root.joinpath(ctx.FILENAME)
    if not module_path.is_file():
        raise RuntimeError(f"no {ctx.FILENAME} found in {ctx.root}")
    spec = spec_from_loader(
        module_name, SourceFileLoader(module_name, str(module_path))
    )
    if not spec or not spec.loader:
        raise RuntimeError(f"failed to load module spec {module_path}")
    project_module = module_from_spec(spec)
    setattr(project_module, "CTX", ctx)
    spec.loader.exec_module(project_module)


def load_project(project_root: Path = Path(".")) -> Project:
    ctx = ProjectContext(Path(project_root).resolve())
    load_user_module(ctx)
    return ctx.project()
