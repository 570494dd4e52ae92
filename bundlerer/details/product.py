from enum import Enum


# Product kinds a target can build, values match the names used in
# PROJECT.bundlerer files.
class Product(Enum):
    APP = "app"
    STATIC_LIBRARY = "static_library"
    DYNAMIC_LIBRARY = "dynamic_library"
    FRAMEWORK = "framework"
    STATIC_FRAMEWORK = "static_framework"
    UNIT_TESTS = "unit_tests"
    UI_TESTS = "ui_tests"
    BUNDLE = "bundle"
    COMMAND_LINE_TOOL = "command_line_tool"
    APP_CLIP = "app_clip"
    APP_EXTENSION = "app_extension"
    WATCH2_APP = "watch2_app"
    WATCH2_EXTENSION = "watch2_extension"
    TV_TOP_SHELF_EXTENSION = "tv_top_shelf_extension"
    MESSAGES_EXTENSION = "messages_extension"
    STICKER_PACK_EXTENSION = "sticker_pack_extension"
    XPC = "xpc"
    SYSTEM_EXTENSION = "system_extension"
    EXTENSION_KIT_EXTENSION = "extension_kit_extension"
    MACRO = "macro"

    @property
    def supports_resources(self) -> bool:
        return self not in (
            Product.STATIC_LIBRARY,
            Product.DYNAMIC_LIBRARY,
            Product.STATIC_FRAMEWORK,
        )

    @property
    def supports_sources(self) -> bool:
        return self not in (Product.STICKER_PACK_EXTENSION, Product.WATCH2_APP)


class Destination(Enum):
    IPHONE = "iphone"
    IPAD = "ipad"
    MAC = "mac"
    MAC_WITH_IPAD_DESIGN = "mac_with_ipad_design"
    MAC_CATALYST = "mac_catalyst"
    APPLE_WATCH = "apple_watch"
    APPLE_TV = "apple_tv"
    APPLE_VISION = "apple_vision"

    @property
    def platform_filter(self) -> str:
        return {
            Destination.IPHONE: "ios",
            Destination.IPAD: "ios",
            Destination.MAC_WITH_IPAD_DESIGN: "ios",
            Destination.MAC: "macos",
            Destination.MAC_CATALYST: "catalyst",
            Destination.APPLE_WATCH: "watchos",
            Destination.APPLE_TV: "tvos",
            Destination.APPLE_VISION: "visionos",
        }[self]
