from argparse import ArgumentParser
import logging
import os
import sys

from bundlerer.details.content_hasher import Blake2bContentHasher
from bundlerer.details.tools.apply import apply_main
from bundlerer.details.tools.graph import graph_main
from bundlerer.details.tools.map import map_main
from bundlerer.details.tools.validate import validate_main
from bundlerer.details.workspace import load_project
from bundlerer.errors import BundlererError
from bundlerer.mappers import ResourcesProjectMapper


def main(argv=None):
    COMMANDS = {
        "apply": apply_main,
        "graph": graph_main,
        "map": map_main,
        "validate": validate_main,
    }
    # parse common arguments...
    parser = ArgumentParser(prog="bundlerer")
    parser.add_argument("command", choices=COMMANDS.keys())
    parser.add_argument("--project", type=str, default=".")
    parser.add_argument("--jobs", type=int, default=os.cpu_count() or 1)
    parser.add_argument("--verbose", action="store_true")
    args, unknown_args = parser.parse_known_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # load project and run the command against it...
    project = load_project(args.project)
    mapper = ResourcesProjectMapper(Blake2bContentHasher(), jobs=args.jobs)
    try:
        exit_code = COMMANDS[args.command](
            project=project,
            mapper=mapper,
            command_args=unknown_args,
        )
    except BundlererError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        exit_code = 1
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
