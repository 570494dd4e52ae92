# Objective-C bundle accessor.
#
# The header declares a C function returning the target's resource bundle and
# aliases it as SWIFTPM_MODULE_BUNDLE, so code shared with Swift packages
# compiles unchanged. The implementation expects the bundle next to the main
# executable's bundle.

from bundlerer.generators.accessors.utils import bundle_function_name

MODULE_BUNDLE_MACRO = "SWIFTPM_MODULE_BUNDLE"


def objc_header_file_content(target_name: str, project_name: str) -> str:
    function_name = bundle_function_name(project_name, target_name)
    return f"""\
#import <Foundation/Foundation.h>

#if __cplusplus
extern "C" {{
#endif

NSBundle* {function_name}(void);

#define {MODULE_BUNDLE_MACRO} {function_name}()

#if __cplusplus
}}
#endif
"""


def objc_implementation_file_content(
    target_name: str, bundle_name: str, project_name: str, header_file_name: str
) -> str:
    function_name = bundle_function_name(project_name, target_name)
    return f"""\
#import <Foundation/Foundation.h>
#import "{header_file_name}"

NSBundle* {function_name}(void) {{
    NSURL *bundleURL = [[[NSBundle mainBundle] bundleURL] URLByAppendingPathComponent:@"{bundle_name}.bundle"];

    NSBundle *bundle = [NSBundle bundleWithURL:bundleURL];

    return bundle;
}}
"""
