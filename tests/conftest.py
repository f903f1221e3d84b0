import os
import sys
import json
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless mode for pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from random_util import RandomUtil  # noqa: E402


@pytest.fixture
def config():
    with open(ROOT / "config.json", "r") as f:
        return json.load(f)


@pytest.fixture
def sim_config(config):
    return config["simulation"]


@pytest.fixture
def rng():
    return RandomUtil.from_seed(12345)
