from bundlerer.config import BundleAccessorOptions, ProjectOptions
from bundlerer.conditional import PlatformCondition
from bundlerer.errors import (
    BundlererError,
    BundleNameCollisionError,
    GeneratedFileCollisionError,
    ContentHashingError,
)
