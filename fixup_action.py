import subprocess


DEFAULT_FIXUP_COMMAND = ["git", "commit", "--fixup"]


def run_fixup(commit_id, command=None, cwd=None) -> bool:
    """Run the fixup command for `commit_id` in the user's terminal."""
    argv = list(command or DEFAULT_FIXUP_COMMAND) + [commit_id]
    try:
        result = subprocess.run(argv, cwd=cwd).returncode
    except FileNotFoundError:
        result = 127
    except OSError:
        result = 1
    return result == 0
