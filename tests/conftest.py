from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

SAMPLE_DOTENV = """\
s=hello
S3_BUCKET=YOURS3BUCKET
HASH="#"
INT=1
"""


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_env_path(write_env) -> Path:
    return write_env(SAMPLE_DOTENV)
