import os
import shutil
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from commit_source import GitCommitSource, SourceUnavailable
from config_paths import load_config
from expansion_store import ExpansionStore
from fixup_action import run_fixup
from orchestrator import Orchestrator
from pagination import PagedList
from terminal_session import interactive_mode

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = (
    "git-fixup-menu - pick a commit and create a fixup commit for it\n\n"
    "Usage:\n  git-fixup-menu\n  git-fixup-menu -v\n"
)


def _initial_fetch(cfg) -> int:
    if cfg.get("INITIAL_FETCH"):
        return cfg["INITIAL_FETCH"]
    rows = shutil.get_terminal_size().lines
    return max(1, rows * 2)


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args or "--help" in args:
        print(USAGE)
        return

    cfg = load_config()

    try:
        source = GitCommitSource(".", short_id_length=cfg["SHORT_ID_LENGTH"])
    except SourceUnavailable:
        print("Not a valid git repo.", file=sys.stderr)
        return

    commits = PagedList(source)
    commits.grow(_initial_fetch(cfg))
    if len(commits) == 0:
        print("No commits found.", file=sys.stderr)
        return

    expansion = ExpansionStore(lambda i: source.fetch_full_message(commits[i].rev))

    with interactive_mode() as term:
        index = Orchestrator(term, commits, expansion, page_size=cfg["PAGE_SIZE"]).run()

    if index is None:
        return

    if not run_fixup(commits[index].rev, cfg["FIXUP_COMMAND"], cwd=source.working_dir):
        print("git commit --fixup failed", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
