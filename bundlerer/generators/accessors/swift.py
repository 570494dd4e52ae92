# Swift bundle accessor.
#
# Generates a `Bundle.module` extension for a target. Targets whose product
# can't carry resources get an accessor that looks for the companion
# "<bundle_name>.bundle" in the places it can end up at runtime, every other
# target just hands out the bundle its own code was loaded from.

from bundlerer.details.targets.target import Target

ENVIRONMENT_OVERRIDE = "PACKAGE_RESOURCE_BUNDLE_PATH"
EMBEDDED_BINARY_SUFFIX = ".framework"

_HEADER = """\
// swiftlint:disable all
// swift-format-ignore-file
// swiftformat:disable all
import Foundation

// MARK: - Swift Bundle Accessor

private class BundleFinder {}

"""

_FOOTER = """\
// swiftlint:enable all
// swiftformat:enable all
"""


def _searching_accessor(target_name: str, bundle_name: str) -> str:
    return f"""\
extension Foundation.Bundle {{
    /// Since {target_name} can't embed resources, the bundle containing the resources is copied into the final product.
    static let module: Bundle = {{
        let bundleName = "{bundle_name}"

        var candidates = [
            Bundle.main.resourceURL,
            Bundle(for: BundleFinder.self).resourceURL,
            Bundle.main.bundleURL,
        ]

        // Xcode previews load the bundle from the directory given in this
        // environment variable, or from one of the frameworks inside it.
        if let override = ProcessInfo.processInfo.environment["{ENVIRONMENT_OVERRIDE}"] {{
            candidates.append(URL(fileURLWithPath: override))

            if let subpaths = try? FileManager.default.contentsOfDirectory(atPath: override) {{
                for subpath in subpaths {{
                    if subpath.hasSuffix("{EMBEDDED_BINARY_SUFFIX}") {{
                        candidates.append(URL(fileURLWithPath: override + "/" + subpath))
                    }}
                }}
            }}
        }}

        for candidate in candidates {{
            let bundlePath = candidate?.appendingPathComponent(bundleName + ".bundle")
            if let bundle = bundlePath.flatMap(Bundle.init(url:)) {{
                return bundle
            }}
        }}
        fatalError("unable to find bundle named {bundle_name}")
    }}()
}}
"""


def _direct_accessor(target_name: str) -> str:
    return f"""\
extension Foundation.Bundle {{
    /// Since {target_name} embeds its own resources, the bundle for classes within this module can be used directly.
    static let module = Bundle(for: BundleFinder.self)
}}
"""


def swift_file_content(target_name: str, bundle_name: str, target: Target) -> str:
    if target.supports_resources:
        body = _direct_accessor(target_name)
    else:
        body = _searching_accessor(target_name, bundle_name)
    return _HEADER + body + _FOOTER
