import sys

from argparse import ArgumentParser
from typing import Optional, TextIO

from bundlerer.details.product import Product
from bundlerer.details.project import Project
from bundlerer.mappers import ResourcesProjectMapper


def write_graph(project: Project, file: TextIO, platform: Optional[str] = None):
    print("digraph DependencyGraph {", file=file)
    print(f'  label = "{project.name}";', file=file)
    for tgt in project.targets:
        shape = "box" if tgt.product is Product.BUNDLE else "oval"
        print(f'  "{tgt.name}" [label="{tgt.name}", shape={shape}];', file=file)
    for tgt in project.targets:
        deps = [
            d
            for d in tgt.dependencies
            if platform is None or d.condition is None or d.condition(platform)
        ]
        names = ", ".join(f'"{d.name}"' for d in deps)
        print(f'  "{tgt.name}" -> {{{names}}};', file=file)
    print("}", file=file)


def graph_main(project: Project, mapper: ResourcesProjectMapper, command_args: list[str]):
    parser = ArgumentParser(prog="bundlerer graph")
    parser.add_argument("--platform", type=str, default=None)
    args = parser.parse_args(command_args)
    mapped_project, _ = mapper.map(project)
    write_graph(mapped_project, sys.stdout, platform=args.platform)
