from bundlerer.generators.accessors.objc import (
    objc_header_file_content,
    objc_implementation_file_content,
)
from bundlerer.generators.accessors.swift import swift_file_content
from bundlerer.generators.accessors.utils import (
    accessor_file_name,
    bundle_function_name,
    camelized,
    sanitized_bundle_name,
    to_valid_identifier,
)
