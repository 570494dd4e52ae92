import pytest

from bundlerer.conditional import PlatformCondition
from bundlerer.details.product import Destination, Product
from tests.conftest import PROJECT_PATH, make_project, make_target


@pytest.mark.parametrize(
    "product", [Product.STATIC_LIBRARY, Product.DYNAMIC_LIBRARY, Product.STATIC_FRAMEWORK]
)
def test_libraries_do_not_support_resources(product):
    assert not product.supports_resources
    assert product.supports_sources


@pytest.mark.parametrize(
    "product", [Product.APP, Product.FRAMEWORK, Product.UNIT_TESTS, Product.UI_TESTS, Product.BUNDLE]
)
def test_products_with_resources(product):
    assert product.supports_resources


def test_products_without_sources():
    assert not Product.STICKER_PACK_EXTENSION.supports_sources
    assert not Product.WATCH2_APP.supports_sources


def test_dependency_platform_filters():
    target = make_target(
        destinations=frozenset(
            {Destination.IPHONE, Destination.MAC_WITH_IPAD_DESIGN, Destination.APPLE_VISION}
        )
    )
    assert target.dependency_platform_filters == frozenset({"ios", "visionos"})


def test_platform_condition():
    assert PlatformCondition.when(set()) is None
    condition = PlatformCondition.when({"ios", "macos"})
    assert condition("ios")
    assert not condition("tvos")
    assert str(condition) == "ios,macos"


def test_source_and_resource_predicates():
    target = make_target(sources=["a.swift", "b.mm"], resources=["PrivacyInfo.xcprivacy"])
    assert target.contains_swift_files
    assert target.contains_objc_files
    assert not target.contains_bundle_accessed_resources
    assert not make_target(sources=["a.c", "b.h"]).contains_objc_files


def test_derived_paths_are_shared_by_the_project():
    project = make_project(make_target(name="A"), make_target(name="B"))

    assert project.derived_directory_path == PROJECT_PATH / "Derived"
    assert project.derived_sources_path == PROJECT_PATH / "Derived" / "Sources"
