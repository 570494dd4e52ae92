from dataclasses import dataclass


@dataclass(frozen=True)
class BundleAccessorOptions:
    enabled: bool = True
    # Also synthesize the Objective-C accessor (header, implementation and
    # prefix header setting) for targets with .m/.mm sources.
    include_objc_accessor: bool = True

    @staticmethod
    def disabled() -> "BundleAccessorOptions":
        return BundleAccessorOptions(enabled=False, include_objc_accessor=False)


class ProjectOptions:
    def __init__(
        self,
        bundle_accessors: BundleAccessorOptions = BundleAccessorOptions(),
        disable_bundle_accessors: bool = False,
        **kwargs
    ):
        if disable_bundle_accessors:
            bundle_accessors = BundleAccessorOptions.disabled()
        self.bundle_accessors = bundle_accessors
        # Options owned by other stages (schemes, text settings, ...) are
        # carried along untouched.
        self.__dict__.update(kwargs)

    @property
    def disable_bundle_accessors(self) -> bool:
        return not self.bundle_accessors.enabled

    def __eq__(self, other):
        return isinstance(other, ProjectOptions) and self.__dict__ == other.__dict__

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"ProjectOptions({fields})"
