"""Loading triangulation test cases from a folder of JSON files or from one JSON document."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from deltamesh.geom import IntPoint

logger = logging.getLogger(__name__)


def _parse_point(raw: Any) -> IntPoint:
    if isinstance(raw, dict):
        x, y = raw["x"], raw["y"]
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        x, y = raw
    else:
        raise ValueError(f"not a point: {raw!r}")
    if not isinstance(x, int) or not isinstance(y, int) or isinstance(x, bool) or isinstance(y, bool):
        raise ValueError(f"point coordinates must be integers: {raw!r}")
    return IntPoint(x, y)


def _parse_paths(raw: Any) -> list[list[IntPoint]]:
    if not isinstance(raw, list):
        raise ValueError("paths must be a list")
    result = []
    for path in raw:
        if not isinstance(path, list):
            raise ValueError("a path must be a list of points")
        result.append([_parse_point(point) for point in path])
    return result


@dataclass
class TriangleTest:
    """One test case: the integer paths of a shape."""

    paths: list[list[IntPoint]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> TriangleTest:
        """Build a test from decoded JSON; raise ValueError when it does not fit."""
        if not isinstance(data, dict) or "paths" not in data:
            raise ValueError("a test must be an object with 'paths'")
        try:
            return cls(_parse_paths(data["paths"]))
        except (KeyError, TypeError) as error:
            raise ValueError(f"invalid test data: {error}") from error

    def copy(self) -> TriangleTest:
        return TriangleTest([list(path) for path in self.paths])

    @classmethod
    def load(cls, index: int, folder: str | Path) -> TriangleTest | None:
        """Read ``test_<index>.json`` from ``folder``; None when it is missing or invalid."""
        path = Path(folder) / f"test_{index}.json"
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as error:
            logger.error("cannot read %s: %s", path, error)
            return None
        try:
            return cls.from_json(json.loads(text))
        except ValueError as error:
            logger.error("failed to parse JSON in %s: %s", path, error)
            return None

    @staticmethod
    def tests_count(folder: str | Path) -> int:
        """Number of ``.json`` entries in ``folder``; 0 when it cannot be read."""
        try:
            return sum(1 for entry in Path(folder).iterdir() if entry.suffix == ".json")
        except OSError as error:
            logger.error("failed to read directory %s: %s", folder, error)
            return 0


class TriangleResource:
    """A numbered set of test cases, read lazily from a folder or held in memory."""

    def __init__(
        self,
        count: int,
        folder: str | Path | None = None,
        tests: dict[int, TriangleTest] | None = None,
    ) -> None:
        self.count = count
        self.folder = None if folder is None else Path(folder)
        self.tests: dict[int, TriangleTest] = dict(tests or {})

    @classmethod
    def with_path(cls, folder: str | Path) -> TriangleResource:
        """Tests stored as ``test_<n>.json`` files in ``folder``."""
        return cls(TriangleTest.tests_count(folder), folder=folder)

    @classmethod
    def with_content(cls, content: str) -> TriangleResource:
        """Tests given as one JSON array; invalid content gives an empty set."""
        try:
            data = json.loads(content)
            if not isinstance(data, list):
                raise ValueError("content must be a JSON array of tests")
            tests = [TriangleTest.from_json(item) for item in data]
        except ValueError as error:
            logger.error("failed to parse JSON content: %s", error)
            tests = []
        return cls(len(tests), tests=dict(enumerate(tests)))

    def load(self, index: int) -> TriangleTest | None:
        """A copy of test ``index``, or None when it does not exist or cannot be read."""
        if index < 0 or self.count <= index:
            return None
        cached = self.tests.get(index)
        if cached is not None:
            return cached.copy()
        if self.folder is None:
            return None
        test = TriangleTest.load(index, self.folder)
        if test is None:
            return None
        self.tests[index] = test
        return test.copy()