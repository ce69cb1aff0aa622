from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable

import pytest

from classtiming import GenerationParams

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    # Isolated copy of data/ so outputs/ and logs/ land in tmp_path
    shutil.copytree(ROOT / "data", tmp_path / "data")
    return tmp_path


@pytest.fixture
def make_params() -> Callable[..., GenerationParams]:
    def _make(**overrides) -> GenerationParams:
        base = dict(
            start_time="08:00",
            periods_count=4,
            period_duration=45,
            short_break_duration=15,
            short_break_after=frozenset(),
            lunch_duration=30,
            lunch_after_period=2,
        )
        base.update(overrides)
        return GenerationParams(**base)

    return _make
