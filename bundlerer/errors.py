class BundlererError(RuntimeError):
    pass


class ContentHashingError(BundlererError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"unable to hash generated file '{path}': {reason}")
        self.path = path
        self.reason = reason


class BundleNameCollisionError(BundlererError):
    def __init__(self, bundle_name: str, target_name: str, project_name: str):
        super().__init__(
            f"resource bundle '{bundle_name}' for target '{target_name}' collides "
            f"with an existing target in project '{project_name}'"
        )
        self.bundle_name = bundle_name
        self.target_name = target_name
        self.project_name = project_name


class GeneratedFileCollisionError(BundlererError):
    def __init__(self, path: str, target_names):
        super().__init__(
            f"targets {', '.join(repr(t) for t in target_names)} generate the same file '{path}'"
        )
        self.path = path
        self.target_names = tuple(target_names)
