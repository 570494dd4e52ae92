import textwrap

import pytest

from bundlerer.details.product import Destination, Product
from bundlerer.details.workspace import load_project

PROJECT_FILE = """
from bundlerer import BundleAccessorOptions, PlatformCondition
from bundlerer.details.targets.target import TargetDependency

CTX.set_project(
    name="App",
    bundle_accessors=BundleAccessorOptions(include_objc_accessor=False),
    development_region="en",
)
CTX.add_target(
    name="Kit",
    product="static_library",
    bundle_id="dev.bundlerer.Kit",
    destinations=["iphone", "mac"],
    sources=["Kit/Sources/**/*.swift", "!Kit/Sources/Generated/*"],
    resources=["Kit/Resources/*"],
)
CTX.add_target(
    name="App",
    product="app",
    bundle_id="dev.bundlerer.App",
    sources=["App/*.swift"],
    settings={"SWIFT_VERSION": "5.0"},
    dependencies=["Kit", TargetDependency(name="Extras", condition=PlatformCondition.when({"ios"}))],
)
"""


def write_files(root, files):
    for name, content in files.items():
        path = root.joinpath(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


def test_load_project(tmp_path):
    write_files(
        tmp_path,
        {
            "PROJECT.bundlerer": PROJECT_FILE,
            "Kit/Sources/b.swift": "",
            "Kit/Sources/a.swift": "",
            "Kit/Sources/Generated/skip.swift": "",
            "Kit/Resources/icon.png": "",
            "App/main.swift": "",
        },
    )

    project = load_project(tmp_path)

    assert project.name == "App"
    assert project.path == tmp_path.resolve()
    assert project.options.development_region == "en"
    assert not project.options.bundle_accessors.include_objc_accessor
    assert not project.options.disable_bundle_accessors
    kit, app = project.targets
    assert kit.product is Product.STATIC_LIBRARY
    assert kit.destinations == frozenset({Destination.IPHONE, Destination.MAC})
    assert [s.path.name for s in kit.sources] == ["a.swift", "b.swift"]
    assert [r.path.name for r in kit.resources] == ["icon.png"]
    assert app.settings.base == {"SWIFT_VERSION": "5.0"}
    assert [d.name for d in app.dependencies] == ["Kit", "Extras"]
    assert app.dependencies[0].condition is None


def test_missing_project_file(tmp_path):
    with pytest.raises(RuntimeError, match="no PROJECT.bundlerer"):
        load_project(tmp_path)


def test_project_must_be_declared(tmp_path):
    write_files(tmp_path, {"PROJECT.bundlerer": ""})

    with pytest.raises(RuntimeError, match="does not declare a project"):
        load_project(tmp_path)


def test_duplicate_target_names(tmp_path):
    project_file = textwrap.dedent(
        """
        CTX.set_project(name="App")
        CTX.add_target(name="Kit", product="framework", bundle_id="a")
        CTX.add_target(name="Kit", product="framework", bundle_id="b")
        """
    )
    write_files(tmp_path, {"PROJECT.bundlerer": project_file})

    with pytest.raises(ValueError, match="already exists"):
        load_project(tmp_path)


def test_disable_bundle_accessors_option(tmp_path):
    write_files(
        tmp_path,
        {"PROJECT.bundlerer": 'CTX.set_project(name="App", disable_bundle_accessors=True)\n'},
    )

    assert load_project(tmp_path).options.disable_bundle_accessors
