"""Static table of places where macOS applications leave files behind.

Each entry is a PathTemplate rendered once per application identifier.
The table is deliberately over-inclusive; discovery keeps only the
paths that actually exist. New artifact locations are added here and
nowhere else.
"""

from zapctl.models.artifact import ArtifactKind, ArtifactScope, PathTemplate

_U = ArtifactScope.USER
_S = ArtifactScope.SYSTEM
_K = ArtifactKind

# App extension bundles that get their own sandbox container
APP_EXTENSION_SUFFIXES: tuple[str, ...] = (
    "ThumbnailExtension",
    "QuickLookExtension",
    "ShareExtension",
)

PATH_TEMPLATES: tuple[PathTemplate, ...] = (
    # User Library
    PathTemplate(_U, _K.SUPPORT, "Library/Application Support/{id}"),
    PathTemplate(_U, _K.PREFERENCE, "Library/Preferences/{id}.plist"),
    PathTemplate(_U, _K.PREFERENCE, "Library/Preferences/com.{id}.plist"),
    PathTemplate(_U, _K.CACHE, "Library/Caches/{id}"),
    PathTemplate(_U, _K.HTTP_STORAGE, "Library/HTTPStorages/{id}"),
    PathTemplate(_U, _K.HTTP_STORAGE, "Library/HTTPStorages/{id}.binarycookies"),
    PathTemplate(_U, _K.WEB_STORAGE, "Library/WebKit/{id}"),
    PathTemplate(_U, _K.COOKIES, "Library/Cookies/{id}.binarycookies"),
    PathTemplate(_U, _K.SAVED_STATE, "Library/Saved Application State/{id}.savedState"),
    PathTemplate(_U, _K.CONTAINER, "Library/Containers/{id}"),
    *(
        PathTemplate(_U, _K.CONTAINER, f"Library/Containers/{{id}}.{suffix}")
        for suffix in APP_EXTENSION_SUFFIXES
    ),
    PathTemplate(_U, _K.GROUP_CONTAINER, "Library/Group Containers/{id}"),
    PathTemplate(_U, _K.APP_SCRIPTS, "Library/Application Scripts/{id}"),
    PathTemplate(_U, _K.LOG, "Library/Logs/{id}"),
    PathTemplate(_U, _K.LAUNCH_AGENT, "Library/LaunchAgents/{id}.plist"),
    PathTemplate(_U, _K.INPUT_METHOD, "Library/Input Methods/{id}.app"),
    PathTemplate(_U, _K.PREFERENCE_PANE, "Library/PreferencePanes/{id}.prefPane"),
    PathTemplate(_U, _K.QUICK_LOOK, "Library/QuickLook/{id}.qlgenerator"),
    PathTemplate(_U, _K.SCREEN_SAVER, "Library/Screen Savers/{id}.saver"),
    PathTemplate(_U, _K.SERVICE, "Library/Services/{id}.service"),
    PathTemplate(_U, _K.SPOTLIGHT, "Library/Spotlight/{id}.mdimporter"),
    PathTemplate(_U, _K.INTERNET_PLUGIN, "Library/Internet Plug-Ins/{id}.plugin"),
    # System Library
    PathTemplate(_S, _K.SUPPORT, "/Library/Application Support/{id}"),
    PathTemplate(_S, _K.PREFERENCE, "/Library/Preferences/{id}.plist"),
    PathTemplate(_S, _K.CACHE, "/Library/Caches/{id}"),
    PathTemplate(_S, _K.LOG, "/Library/Logs/{id}"),
    PathTemplate(_S, _K.LAUNCH_AGENT, "/Library/LaunchAgents/{id}.plist"),
    PathTemplate(_S, _K.LAUNCH_DAEMON, "/Library/LaunchDaemons/{id}.plist"),
    PathTemplate(_S, _K.KERNEL_EXTENSION, "/Library/Extensions/{id}.kext"),
    PathTemplate(_S, _K.INPUT_METHOD, "/Library/Input Methods/{id}.app"),
    PathTemplate(_S, _K.PREFERENCE_PANE, "/Library/PreferencePanes/{id}.prefPane"),
    PathTemplate(_S, _K.QUICK_LOOK, "/Library/QuickLook/{id}.qlgenerator"),
    PathTemplate(_S, _K.SCREEN_SAVER, "/Library/Screen Savers/{id}.saver"),
    PathTemplate(_S, _K.SERVICE, "/Library/Services/{id}.service"),
    PathTemplate(_S, _K.SPOTLIGHT, "/Library/Spotlight/{id}.mdimporter"),
    PathTemplate(_S, _K.STARTUP_ITEM, "/Library/StartupItems/{id}"),
    PathTemplate(_S, _K.INTERNET_PLUGIN, "/Library/Internet Plug-Ins/{id}.plugin"),
    PathTemplate(_S, _K.HELPER_TOOL, "/Library/PrivilegedHelperTools/{id}"),
    # Installer receipts
    PathTemplate(_S, _K.RECEIPT, "/Library/Receipts/{id}.pkg"),
    PathTemplate(_S, _K.RECEIPT, "/private/var/db/receipts/{id}.bom"),
    PathTemplate(_S, _K.RECEIPT, "/private/var/db/receipts/{id}.plist"),
)
