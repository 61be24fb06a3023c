import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'xblock'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def _isolate_xblock_env(monkeypatch) -> None:
    """Drop XBLOCK_* overrides from the developer's shell."""
    import os

    for key in list(os.environ):
        if key.startswith("XBLOCK_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_reader() -> Callable[[Dict[str, str]], Callable[[str], str]]:
    """Build an in-memory reader over ``{resolved_path: text}``.

    The returned reader exposes ``calls`` so tests can assert cache hits.
    """

    def factory(files: Dict[str, str]) -> Callable[[str], str]:
        calls: list[str] = []

        def read(resolved_path: str) -> str:
            calls.append(resolved_path)
            if resolved_path not in files:
                raise FileNotFoundError(resolved_path)
            return files[resolved_path]

        read.calls = calls  # type: ignore[attr-defined]
        return read

    return factory


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Project root with an empty src/ tree."""
    (tmp_path / "src").mkdir()
    return tmp_path
