from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from superheroes.catalog import HeroCatalog  # noqa: E402
from superheroes.models import Hero  # noqa: E402

from hero_helpers import A_BOMB_STATS, ANT_MAN_STATS, hero_records  # noqa: E402


@pytest.fixture
def a_bomb() -> Hero:
    return Hero(id=1, name="A-Bomb", image="images/1.jpg", powerstats=A_BOMB_STATS)


@pytest.fixture
def ant_man() -> Hero:
    return Hero(id=2, name="Ant-Man", image="images/2.jpg", powerstats=ANT_MAN_STATS)


@pytest.fixture
def heroes() -> List[Hero]:
    return [Hero.model_validate(record) for record in hero_records()]


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    path = tmp_path / "superheroes.json"
    path.write_text(json.dumps(hero_records()), encoding="utf-8")
    return path


@pytest.fixture
def catalog(dataset_file: Path) -> HeroCatalog:
    return HeroCatalog(data_file=dataset_file)
