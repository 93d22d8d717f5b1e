#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
INI Preset Editor - Command Line Interface

Edits INI configuration files from the shell: inspect, set values,
deduplicate, back up, and apply or exchange presets. Every write goes
through the same backup + atomic replace path as the editor session.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .app.session import EditorSession
from .config import EditorSettings, load_settings, remember_recent, save_config
from .core.preset_codec import decode_presets
from .exceptions import BaseError
from .logging_config import setup_logging
from .presets.catalog import PresetCatalog
from .utils.result import Result, is_err, is_ok, unwrap_or
from .version import load_version

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ini-editor",
        description="INI Preset Editor - edit INI files and apply presets safely",
    )
    parser.add_argument("--config", metavar="PATH", help="Settings file (default: ~/.ini_editor/config.json)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Emit structured JSON log lines")
    parser.add_argument("--version", action="store_true", help="Show version information")

    sub = parser.add_subparsers(dest="command")

    show = sub.add_parser("show", help="List the entries of an INI file")
    show.add_argument("file")
    show.add_argument("--filter", default="", help="Only rows whose section, key or value contains this text")

    set_cmd = sub.add_parser("set", help="Set one value and save")
    set_cmd.add_argument("file")
    set_cmd.add_argument("section")
    set_cmd.add_argument("key")
    set_cmd.add_argument("value")

    normalize = sub.add_parser("normalize", help="Trim entries and drop duplicate keys, then save")
    normalize.add_argument("file")
    normalize.add_argument("--dry-run", action="store_true", help="Report duplicates without saving")

    backup = sub.add_parser("backup", help="Create a timestamped backup copy")
    backup.add_argument("file")

    sub.add_parser("presets", help="List available presets")

    apply_cmd = sub.add_parser("apply", help="Apply a named preset and save")
    apply_cmd.add_argument("file")
    apply_cmd.add_argument("preset")

    import_cmd = sub.add_parser("import", help="Apply a preset JSON file and save")
    import_cmd.add_argument("file")
    import_cmd.add_argument("preset_json")

    export = sub.add_parser("export", help="Export the entries of an INI file as preset JSON")
    export.add_argument("file")
    export.add_argument("output")
    export.add_argument(
        "--strict-check",
        action="store_true",
        help="Re-read the written file with the strict JSON decoder",
    )

    return parser.parse_args(argv)


def _report(result: Result, session: EditorSession) -> int:
    if is_ok(result):
        print(session.status)
        return EXIT_OK
    print(session.status, file=sys.stderr)
    return EXIT_FAILED


def _load(session: EditorSession, path: str, settings: EditorSettings) -> Optional[int]:
    result = session.load(path)
    if is_err(result):
        print(session.status, file=sys.stderr)
        return EXIT_FAILED
    remember_recent(settings, session.loaded_path)
    return None


def _cmd_show(args, session: EditorSession, settings: EditorSettings) -> int:
    failed = _load(session, args.file, settings)
    if failed is not None:
        return failed
    rows = session.visible_rows(args.filter)
    for index, entry in rows:
        print(f"{index:4d}  [{entry.section}] {entry.key}={entry.value}")
    print(f"{len(rows)} of {len(session.store)} entries shown")
    return EXIT_OK


def _cmd_set(args, session: EditorSession, settings: EditorSettings) -> int:
    failed = _load(session, args.file, settings)
    if failed is not None:
        return failed
    session.store.upsert(args.section, args.key, args.value)
    return _report(session.save(), session)


def _cmd_normalize(args, session: EditorSession, settings: EditorSettings) -> int:
    failed = _load(session, args.file, settings)
    if failed is not None:
        return failed
    removed = session.normalize()
    if args.dry_run:
        print(f"{removed} duplicate rows would be removed")
        return EXIT_OK
    return _report(session.save(), session)


def _cmd_backup(args, session: EditorSession, settings: EditorSettings) -> int:
    failed = _load(session, args.file, settings)
    if failed is not None:
        return failed
    return _report(session.backup(), session)


def _cmd_presets(args, session: EditorSession, settings: EditorSettings) -> int:
    catalog = PresetCatalog.load_default(settings.preset_files)
    for preset in catalog:
        print(f"{preset.name}  ({len(preset.entries)} entries)")
    return EXIT_OK


def _cmd_apply(args, session: EditorSession, settings: EditorSettings) -> int:
    catalog = PresetCatalog.load_default(settings.preset_files)
    if args.preset not in catalog:
        print(f"Unknown preset: {args.preset}", file=sys.stderr)
        return EXIT_FAILED
    failed = _load(session, args.file, settings)
    if failed is not None:
        return failed
    session.apply_preset(catalog.get(args.preset))
    return _report(session.save(), session)


def _cmd_import(args, session: EditorSession, settings: EditorSettings) -> int:
    failed = _load(session, args.file, settings)
    if failed is not None:
        return failed
    result = session.import_preset_file(args.preset_json)
    if is_err(result):
        return _report(result, session)
    if unwrap_or(result, 0) == 0:
        print(session.status)
        return EXIT_OK
    return _report(session.save(), session)


def _cmd_export(args, session: EditorSession, settings: EditorSettings) -> int:
    failed = _load(session, args.file, settings)
    if failed is not None:
        return failed
    result = session.export_preset_file(args.output)
    if is_err(result) or not args.strict_check:
        return _report(result, session)
    with open(args.output, "r", encoding="utf-8") as handle:
        decode_presets(handle.read(), strict=True)
    print(f"{session.status} Strict check passed.")
    return EXIT_OK


COMMANDS = {
    "show": _cmd_show,
    "set": _cmd_set,
    "normalize": _cmd_normalize,
    "backup": _cmd_backup,
    "presets": _cmd_presets,
    "apply": _cmd_apply,
    "import": _cmd_import,
    "export": _cmd_export,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main function of the command line front end."""
    args = parse_arguments(argv)

    if args.version:
        print(f"INI Preset Editor v{load_version()}")
        return EXIT_OK

    settings = load_settings(args.config)
    setup_logging(
        log_level="DEBUG" if args.debug else settings.log_level,
        log_dir=settings.log_dir,
        enable_file_logging=settings.file_logging,
        structured_json=True if args.log_json else (settings.log_json or None),
    )

    handler = COMMANDS.get(args.command or "")
    if handler is None:
        print("No command given. Use --help for usage.", file=sys.stderr)
        return EXIT_FAILED

    session = EditorSession()
    try:
        exit_code = handler(args, session, settings)
    except BaseError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED

    if session.loaded_path:
        save_config(settings, args.config)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
