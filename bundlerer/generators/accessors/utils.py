import re

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")
_WORD_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")

ACCESSOR_FILE_PREFIX = "ResourceBundle+"


def to_valid_identifier(name: str) -> str:
    """
    Turn a target or project name into something usable as a Swift or C
    identifier.

    Every character outside [A-Za-z0-9_] becomes an underscore and a leading
    digit gets an underscore prefix, e.g. "3D-Kit" -> "_3D_Kit".
    """
    identifier = _INVALID_IDENTIFIER_CHARS.sub("_", name)
    if identifier[:1].isdigit():
        identifier = "_" + identifier
    return identifier


def camelized(name: str) -> str:
    # "my-kit_core" -> "MyKitCore"
    parts = [p for p in _WORD_SEPARATORS.split(name) if p]
    return "".join(p[:1].upper() + p[1:] for p in parts)


def sanitized_bundle_name(bundle_name: str) -> str:
    return bundle_name.replace("-", "_")


def bundle_function_name(project_name: str, target_name: str) -> str:
    return to_valid_identifier(f"{project_name}_{target_name}_BUNDLE")


def accessor_file_name(target_name: str, extension: str) -> str:
    if extension == "swift":
        return f"{ACCESSOR_FILE_PREFIX}{to_valid_identifier(target_name)}.swift"
    return f"{ACCESSOR_FILE_PREFIX}{camelized(target_name)}.{extension}"
