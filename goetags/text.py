"""Centralized user-facing text for goetags CLI."""

from __future__ import annotations

class Styles:
    ERROR = "red"
    WARNING = "yellow"
    SUCCESS = "green"
    INFO = "dim"


class Messages:
    APP_HELP = "goetags – Emacs TAGS generator for Go source files."
    HELP_FILES = "Go source files to tag."
    HELP_FULL_TAG = "Make package.Type.Method tags for methods."
    HELP_APPEND = "Append to the tag file instead of replacing it."
    HELP_OUTPUT = "Name of the tag file to write."
    HELP_DIR = "Directory the tag file is written into."
    HELP_INPUT = "File holding a newline-delimited list of source files to tag."
    HELP_WORKERS = "Number of files parsed concurrently."
    HELP_SHOW_CONFIG = "Show current configuration."
    HELP_SET_OUTPUT = "Set the default tag file name."
    HELP_SET_DIR = "Set the default directory for the tag file."
    HELP_CLEAR_DIR = "Write the tag file into the current directory again."
    HELP_SET_WORKERS = "Set the default number of parse workers."
    HELP_SET_FULL_TAG = "Set whether method tags include the package (true/false)."
    HELP_SET_APPEND = "Set whether runs append to the tag file (true/false)."

    USAGE = "Usage: goetags [-f] [-a] [-o TagsFile] [-d Dir] [-i ListOfFilesFile] source.go ..."
    ERROR_NO_FILES = "No source files given."
    ERROR_WORKERS_INVALID = "Worker count must be >= 1."
    ERROR_OUTPUT_EMPTY = "Tag file name must not be empty."
    ERROR_BOOLEAN_INVALID = "Invalid boolean value `{value}`; use true/false."
    ERROR_FILE_LIST = "Unable to read file list {path}: {reason}"
    ERROR_FILE_FAILED = "{path}: {reason}"
    ERROR_ALL_FAILED = "Parsing errors experienced in every file; {path} left untouched."
    ERROR_STORE_OPEN = "Unable to open tag file {path}: {reason}"
    ERROR_STORE_WRITE = "Unable to write tag file {path}: {reason}"
    ERROR_STORE_EMPTY = "Refusing to write an empty tag file to {path}."
    ERROR_CONFIG_JSON_INVALID = "Config JSON must be an object."
    ERROR_CONFIG_VALUE_INVALID = "Config value for `{field}` is invalid."
    ERROR_DIR_CONFLICT = "Use either --set-dir or --clear-dir, not both."

    INFO_TAGS_WRITTEN = "Wrote {count} file block{plural} ({size} bytes) to {path}."
    INFO_TAGS_APPENDED = "Appended {count} file block{plural} ({size} bytes) to {path}."
    INFO_SKIPPED = "Skipped {count} file{plural} that failed to parse."
    INFO_OUTPUT_SET = "Default tag file name set to {value}."
    INFO_DIR_SET = "Default tag directory set to {value}."
    INFO_DIR_CLEARED = "Default tag directory cleared."
    INFO_WORKERS_SET = "Default worker count set to {value}."
    INFO_FULL_TAG_SET = "Full method tags set to {value}."
    INFO_APPEND_SET = "Append mode set to {value}."
    INFO_CONFIG_SUMMARY = (
        "Tag file name: {output}\n"
        "Tag directory: {directory}\n"
        "Workers: {workers}\n"
        "Full method tags: {full_tag}\n"
        "Append mode: {append}"
    )
    INFO_CONFIG_UNCHANGED = "Nothing to update; pass --show to print the configuration."
