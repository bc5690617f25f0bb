#!/usr/bin/env python3
"""Export a browser tab snapshot as a grouped, self-contained HTML page.

Flow:
- Load stored toggles from config.json (~/.config/tabhtml by default)
- Apply command-line toggles on top; optionally persist them (--save)
- Read the tab snapshot (JSON file or stdin)
- Partition and render -> "<title>.html" in the output directory
- Optionally open the page in the default browser

Env:
- TABHTML_CONFIG_PATH overrides the preferences file location.
- TABHTML_OPEN=1 opens the written page without passing --open.
"""

import json
import locale
import os
import stat
import sys
import webbrowser
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from tabhtml.i18n import get_message
from tabhtml.renderer.config import TOGGLE_KEYS
from tabhtml.renderer.renderer import build_state, page_for_state

CONFIG_DIR = Path("~/.config/tabhtml").expanduser()
USAGE = (
    "usage: tabhtml [--verbose] [--window] [--stack] [--host] [--indent] [--no-window|--no-stack|--no-host|--no-indent] "
    "[--locale LOCALE] [--out DIR] [--open] [--save] <snapshot.json|->"
)
FLAG_TOGGLES = {
    "--window": "groupByWindow",
    "--stack": "groupByStack",
    "--host": "groupByHost",
    "--indent": "indentStyle",
}

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_SNAPSHOT = 3
EXIT_CONFIG = 4
EXIT_OUTPUT = 5

_verbose = False


class SnapshotError(Exception):
    pass


def log(msg: str) -> None:
    if not _verbose:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[tabhtml] {ts} {msg}", file=sys.stderr)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on", "y"}


def config_path() -> Path:
    return Path(os.environ.get("TABHTML_CONFIG_PATH", str(CONFIG_DIR / "config.json"))).expanduser()


def load_prefs(path: Path) -> dict:
    if not path.exists():
        return {}
    prefs = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(prefs, dict):
        raise ValueError(f"Preferences must be a JSON object: {path}")
    return prefs


def save_prefs(path: Path, prefs: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(prefs, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)


def load_snapshot(source: str) -> List[dict]:
    """Read tab records from a JSON file, or stdin for "-".

    Accepts a bare list of tabs, `{"tabs": [...]}`, or per-window exports
    (`[{"windowId": 1, "tabs": [...]}, ...]`) which are flattened with each
    tab's position in its window as the index.
    """
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).expanduser().read_text(encoding="utf-8")
        data = json.loads(text)
    except (OSError, ValueError) as exc:
        raise SnapshotError(f"cannot read snapshot {source}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("tabs")
    if not isinstance(data, list):
        raise SnapshotError(f"snapshot {source} holds no tab list")
    return _flatten_windows(data)


def _flatten_windows(records: List) -> List[dict]:
    tabs: List[dict] = []
    for window_pos, record in enumerate(records):
        if isinstance(record, dict) and isinstance(record.get("tabs"), list):
            window_id = record.get("windowId", record.get("id"))
            if window_id is None:
                window_id = window_pos
            for index, tab in enumerate(record["tabs"]):
                if isinstance(tab, dict):
                    tabs.append({"windowId": window_id, "index": index, **tab})
        else:
            tabs.append(record)
    return tabs


def parse_args(argv: List[str]) -> Dict:
    opts: Dict = {
        "verbose": False,
        "overrides": {},
        "locale": None,
        "out": None,
        "open": _env_flag("TABHTML_OPEN"),
        "save": False,
        "source": None,
    }
    args = list(argv[1:])
    idx = 0
    while idx < len(args):
        arg = args[idx]
        if arg in ("-v", "--verbose"):
            opts["verbose"] = True
        elif arg in FLAG_TOGGLES:
            opts["overrides"][FLAG_TOGGLES[arg]] = True
        elif arg.startswith("--no-") and f"--{arg[5:]}" in FLAG_TOGGLES:
            opts["overrides"][FLAG_TOGGLES[f"--{arg[5:]}"]] = False
        elif arg in ("--locale", "--out"):
            if idx + 1 >= len(args):
                raise SystemExit(f"{arg} requires a value")
            idx += 1
            opts[arg[2:]] = args[idx]
        elif arg.startswith("--locale=") or arg.startswith("--out="):
            name, value = arg[2:].split("=", 1)
            opts[name] = value
        elif arg == "--open":
            opts["open"] = True
        elif arg == "--save":
            opts["save"] = True
        elif arg in ("-h", "--help"):
            print(USAGE, file=sys.stderr)
            raise SystemExit(EXIT_OK)
        elif arg.startswith("-") and arg != "-":
            raise SystemExit(f"unknown option: {arg}")
        elif opts["source"] is None:
            opts["source"] = arg
        else:
            raise SystemExit(f"unexpected argument: {arg}")
        idx += 1
    return opts


def present(path: Path) -> bool:
    return webbrowser.open(path.resolve().as_uri())


def main(argv: Optional[List[str]] = None) -> int:
    global _verbose
    if argv is None:
        argv = sys.argv
    try:
        opts = parse_args(argv)
    except SystemExit as exc:
        if exc.code in (None, EXIT_OK):
            return EXIT_OK
        print(f"{exc.code}\n{USAGE}", file=sys.stderr)
        return EXIT_USAGE
    _verbose = opts["verbose"]
    try:
        # Page titles use the user's date and time format.
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        log("locale: falling back to C date format")

    if opts["source"] is None:
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    prefs_path = config_path()
    try:
        stored = load_prefs(prefs_path)
    except (OSError, ValueError) as exc:
        print(f"cannot read preferences {prefs_path}: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    log(f"prefs: {prefs_path} ({'found' if stored else 'defaults'})")

    overrides = dict(opts["overrides"])
    if opts["locale"]:
        overrides["locale"] = opts["locale"]
    if opts["out"]:
        overrides["outputDir"] = opts["out"]

    if opts["save"]:
        updated = dict(stored)
        updated.update({k: v for k, v in overrides.items() if k in TOGGLE_KEYS})
        try:
            save_prefs(prefs_path, updated)
        except OSError as exc:
            print(f"cannot save preferences {prefs_path}: {exc}", file=sys.stderr)
            return EXIT_CONFIG
        log(f"saved toggles to {prefs_path}")

    try:
        tabs_raw = load_snapshot(opts["source"])
    except SnapshotError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_SNAPSHOT
    log(f"snapshot: {len(tabs_raw)} tabs from {opts['source']}")

    cfg = dict(stored)
    cfg.update(overrides)
    state = build_state(tabs_raw, cfg)
    filename, page = page_for_state(state)
    if state["cfg"]["groupByStack"] and not state["stacks_available"]:
        print(get_message("stackUnavailable", state["cfg"]["locale"]), file=sys.stderr)

    out_dir = Path(state["cfg"]["outputDir"]).expanduser()
    out_path = out_dir / filename
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        out_path.write_text(page, encoding="utf-8")
    except OSError as exc:
        print(f"cannot write {out_path}: {exc}", file=sys.stderr)
        return EXIT_OUTPUT
    log(f"wrote {out_path} (groups: {state['enabled']})")

    if opts["open"] and not present(out_path):
        print(f"Could not open a browser for {out_path}", file=sys.stderr)
    print(str(out_path))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
