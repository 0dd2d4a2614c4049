"""
Commit history access.

Walks the history reachable from HEAD lazily, one page at a time, so the
picker never has to read the whole log up front.
"""

from dataclasses import dataclass
from itertools import islice
from typing import Iterator, List, Optional

import git


DEFAULT_SHORT_ID_LENGTH = 7


@dataclass(frozen=True)
class Commit:
    id: str
    summary: str
    # full object name; `id` is the shortened form shown on screen
    sha: str = ""

    @property
    def rev(self) -> str:
        return self.sha or self.id


class CommitSourceError(RuntimeError):
    pass


class SourceUnavailable(CommitSourceError):
    pass


class FetchFailure(CommitSourceError):
    pass


class GitCommitSource:
    def __init__(self, repo_path: str = ".", short_id_length: int = DEFAULT_SHORT_ID_LENGTH):
        try:
            self.repo = git.Repo(repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise SourceUnavailable(f"Not a git repository: {repo_path}") from e
        self.short_id_length = short_id_length
        self._walk: Optional[Iterator[git.Commit]] = None
        self._done = False

    @property
    def working_dir(self) -> Optional[str]:
        return self.repo.working_tree_dir

    def _commits(self) -> Iterator[git.Commit]:
        if self._walk is None:
            if not self.repo.head.is_valid():
                # unborn branch: nothing to walk
                self._walk = iter(())
            else:
                self._walk = self.repo.iter_commits("HEAD", date_order=True)
        return self._walk

    def fetch_page(self, count: int) -> List[Commit]:
        """
        Return up to `count` commits following the ones already handed out.

        A short (or empty) page means the walk reached the root commits.
        """
        if count <= 0 or self._done:
            return []

        page: List[Commit] = []
        try:
            for commit in islice(self._commits(), count):
                page.append(
                    Commit(
                        id=commit.hexsha[: self.short_id_length],
                        summary=_as_text(commit.summary),
                        sha=commit.hexsha,
                    )
                )
        except (ValueError, git.exc.GitError, git.exc.ODBError) as e:
            self._done = True
            if not page:
                raise FetchFailure(f"Failed to read history: {e}") from e
        if len(page) < count:
            self._done = True
        return page

    def fetch_full_message(self, commit_id: str) -> str:
        try:
            return _as_text(self.repo.commit(commit_id).message)
        except (ValueError, git.exc.GitError, git.exc.ODBError) as e:
            raise FetchFailure(f"Failed to read commit {commit_id}: {e}") from e


def _as_text(value) -> str:
    # GitPython hands back bytes when a message cannot be decoded
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value or ""
