from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Optional

# from bundlerer.details.targets.target import TargetDependency
#
# ctx.add_target(
#     ...
#     dependencies = [
#         TargetDependency(name="Core"),
#         TargetDependency(name="UIKitExtras", condition=PlatformCondition.when({"ios", "catalyst"})),
#     ]
# )


@dataclass(frozen=True)
class PlatformCondition:
    platform_filters: FrozenSet[str]

    # An empty filter set means "no condition", so callers get None back and
    # the dependency applies everywhere.
    @staticmethod
    def when(platform_filters: AbstractSet[str]) -> Optional["PlatformCondition"]:
        if not platform_filters:
            return None
        return PlatformCondition(frozenset(platform_filters))

    def __call__(self, platform_filter: str) -> bool:
        return platform_filter in self.platform_filters

    def __str__(self):
        return ",".join(sorted(self.platform_filters))
