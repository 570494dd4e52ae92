from pathlib import Path

import pytest

from bundlerer import ProjectOptions
from bundlerer.details.content_hasher import Blake2bContentHasher
from bundlerer.details.product import Destination, Product
from bundlerer.details.project import Project
from bundlerer.details.targets.target import ResourceFileElement, SourceFile, Target
from bundlerer.mappers import ResourcesProjectMapper

PROJECT_PATH = Path("/work/App")


def make_target(
    name: str = "Kit",
    product: Product = Product.STATIC_LIBRARY,
    sources=(),
    resources=(),
    **kwargs,
) -> Target:
    kwargs.setdefault("bundle_id", f"dev.bundlerer.{name}")
    kwargs.setdefault("destinations", frozenset({Destination.IPHONE, Destination.IPAD}))
    return Target(
        name=name,
        product=product,
        sources=tuple(SourceFile(PROJECT_PATH / "Sources" / s) for s in sources),
        resources=tuple(ResourceFileElement(PROJECT_PATH / "Resources" / r) for r in resources),
        **kwargs,
    )


def make_project(*targets: Target, name: str = "App", **options) -> Project:
    return Project(
        name=name,
        path=PROJECT_PATH,
        options=ProjectOptions(**options),
        targets=tuple(targets),
    )


@pytest.fixture
def hasher():
    return Blake2bContentHasher()


@pytest.fixture
def mapper(hasher):
    return ResourcesProjectMapper(hasher)
