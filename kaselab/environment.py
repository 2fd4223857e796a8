"""
Per-test environments.

An environment is created for one test when the test runs, handed to the
test action ahead of the case values, and torn down when the action
returns or raises:

```python
factory = WorkingDirFactory(tmp_path, "test_migrations")
for test in as_tests(cases, check_migration, environment=factory):
    test()  # check_migration(env, dialect, version)
```

`WorkingDirEnvironment` gives each case its own directory, laid out as
``<root>/<function>/<display name 1>/<display name 2>/...`` using the
case's per-element display names.
"""

from __future__ import annotations

import logging
import re
import shutil
import threading
from pathlib import Path
from typing import Any, Callable, Protocol, runtime_checkable

from kaselab.kase import Kase
from kaselab.labels import DELIMITER_DEFAULT
from kaselab.naming import display_names

logger = logging.getLogger(__name__)

_PATH_UNSAFE = re.compile(r"[/\\\x00]")


@runtime_checkable
class KaseEnvironment(Protocol):
    """
    Protocol for per-test environments.

    Anything with a ``tear_down()`` method qualifies.
    """

    def tear_down(self) -> None:
        """Release whatever the environment holds. Called once per test."""
        ...


EnvironmentFactory = Callable[[Kase], KaseEnvironment]


class WorkingDirEnvironment:
    """
    An environment owning a fresh working directory.

    The directory is emptied and recreated on construction. It is kept
    after `tear_down` unless *keep* is false, so failed tests can be
    inspected.
    """

    def __init__(self, working_dir: Path, *, keep: bool = True) -> None:
        self._working_dir = working_dir
        self._keep = keep
        if working_dir.exists():
            shutil.rmtree(working_dir)
        working_dir.mkdir(parents=True)

    @property
    def working_dir(self) -> Path:
        return self._working_dir

    def tear_down(self) -> None:
        if not self._keep:
            logger.debug(f"Removing {self._working_dir}")
            shutil.rmtree(self._working_dir)

    def __repr__(self) -> str:
        return f"WorkingDirEnvironment({str(self._working_dir)!r})"


def _path_segment(name: str) -> str:
    return _PATH_UNSAFE.sub("_", name)


def working_dir_for(root: Path | str, function_name: str, names: list[str]) -> Path:
    """
    Build the working directory path for one test.

    Path separators in *function_name* and *names* become underscores, so
    each name is exactly one directory level.
    """
    path = Path(root) / _path_segment(function_name)
    for name in names:
        path = path / _path_segment(name)
    return path


class WorkingDirFactory:
    """
    Factory of `WorkingDirEnvironment`, one per case.

    Each directory may be claimed once per factory. Two tests that would
    share a directory raise ``ValueError`` when the second one starts;
    give such cases distinct labels or values.

    Args:
        root: Parent of all working directories, e.g. pytest's ``tmp_path``.
        function_name: Name of the test function, the first path level.
        keep: Keep directories after tear-down.
        delimiter: Between a label and its value in each directory name.
    """

    def __init__(
        self,
        root: Path | str,
        function_name: str,
        *,
        keep: bool = True,
        delimiter: str = DELIMITER_DEFAULT,
    ) -> None:
        self.root = Path(root)
        self.function_name = function_name
        self.keep = keep
        self.delimiter = delimiter
        self._claimed: set[Path] = set()
        self._lock = threading.Lock()

    def __call__(self, kase: Kase) -> WorkingDirEnvironment:
        path = working_dir_for(
            self.root, self.function_name, display_names(kase, self.delimiter)
        )
        with self._lock:
            if path in self._claimed:
                raise ValueError(
                    f"Working directory {path} is already used by another test "
                    f"from {self.function_name!r}; give the cases distinct labels"
                )
            self._claimed.add(path)
        return WorkingDirEnvironment(path, keep=self.keep)


def run_in_environment(
    environment: EnvironmentFactory, kase: Kase, action: Callable[..., Any]
) -> None:
    """
    Create an environment for *kase*, run *action* in it, then tear it down.

    The action is called as ``action(env, *kase.values)``. Tear-down runs
    whether or not the action raises; the action's exception propagates.
    """
    env = environment(kase)
    logger.debug(f"Running {kase} in {env!r}")
    try:
        action(env, *kase.values)
    finally:
        env.tear_down()
