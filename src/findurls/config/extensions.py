"""File extensions that look like TLDs.

A bare candidate such as ``readme.txt`` matches the URL pattern just like
``example.com``. Candidates ending in one of these extensions are only
accepted when they carry an explicit protocol or a path.

Extensions that are also real TLDs (md, zip, rs, pm, app, so) are left out.
"""

from typing import Dict, FrozenSet, Tuple


EXTENSION_GROUPS: Dict[str, Tuple[str, ...]] = {
    "documents": (
        "txt", "pdf", "doc", "docx", "odt", "rtf", "rtfd", "tex", "wpd", "pages", "pages-tef", "epub", "mobi",
        "azw", "ps", "eps", "fb2", "lit", "pdb", "prc", "lrf", "djvu",
    ),
    "data": (
        "csv", "xls", "xlsx", "ods", "numbers", "numbers-tef", "json", "xml", "yaml", "yml", "toml", "ini", "conf",
        "cfg", "log", "env", "properties", "reg",
    ),
    "presentations": ("ppt", "pptx", "odp", "key", "key-tef"),
    "images": (
        "png", "jpg", "jpeg", "gif", "webp", "svg", "tiff", "tif", "bmp", "psd", "heic", "heif", "avif", "ico",
        "raw", "cr2", "nef", "arw", "dng", "dcm", "dicom", "fits", "hdr", "exr",
    ),
    "audio": (
        "mp3", "wav", "aac", "ogg", "oga", "flac", "m4a", "wma", "mid", "midi", "opus", "ra", "rm", "3ga", "amr",
        "caf",
    ),
    "video": (
        "mp4", "mov", "webm", "avi", "mkv", "flv", "wmv", "mpg", "mpeg", "m4v", "3gp", "ogv", "vob", "ts", "mts",
        "m2ts", "divx", "xvid",
    ),
    "archives": (
        "rar", "7z", "tar", "gz", "bz2", "xz", "iso", "dmg", "pkg", "cab", "lzh", "ace", "arj", "lha", "zoo", "arc",
        "pak",
    ),
    "fonts": ("woff", "woff2", "ttf", "otf", "eot"),
    "web": (
        "html", "htm", "css", "less", "sass", "scss", "js", "jsx", "ts", "tsx", "vue", "svelte", "map", "wasm",
    ),
    "programming": (
        "py", "rb", "php", "java", "class", "jar", "cpp", "hpp", "cs", "go", "swift", "sh", "zsh", "bash", "bat",
        "ps1", "pl", "patch", "diff", "lua", "jl", "kt", "dart", "elm", "clj", "hs", "ml", "fs", "vb", "pas",
        "scala", "groovy", "perl", "tcl", "awk", "sed", "vim", "emacs", "unity", "unitypackage", "blend", "max",
        "ma", "mb", "apk", "ipa", "aab", "xcodeproj", "xcworkspace",
    ),
    "design": ("dwg", "dxf", "ai", "sketch", "fig", "obj", "fbx", "stl", "dae", "glb", "gltf"),
    "executables": ("exe", "dll", "bin", "msi", "deb", "rpm"),
    "databases": ("sql", "db", "sqlite", "mdb", "accdb"),
    "virtual_machines": ("ova", "ovf", "qcow2", "ipsw", "iso", "vdi", "vhd", "vhdx", "vmdk", "vmsd", "qed"),
    "configuration": ("dockerfile", "docker-compose", "k8s", "helm", "plist", "entitlements"),
    "backups": ("bak", "tmp", "temp", "swp", "swo", "old", "orig"),
}

DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL: FrozenSet[str] = frozenset(
    ext for group in EXTENSION_GROUPS.values() for ext in group
)
