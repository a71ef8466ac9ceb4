"""Fixed names, bounds and schema defaults for magma.json."""

from __future__ import annotations


CONFIG_FILE_NAME = "magma.json"

# Number of directories examined by the ascent search, the start included
MAX_SEARCH_DEPTH = 50

DEFAULT_OUTPUT_FOLDER = ".magma/obj/generated"
DEFAULT_TYPESCRIPT_OUTPUT = ".magma/obj/ts"
DEFAULT_NODE_MODULES_DIR = ".magma/node_modules"

DEFAULT_OUT_DIR = "dist/scripts"
DEFAULT_TARGET = "es2022"
DEFAULT_BUNDLE = True
DEFAULT_MINIFY = True
DEFAULT_SOURCE_MAP = False
DEFAULT_MODULE_COMMONJS = False
