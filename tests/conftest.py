from __future__ import annotations

import os

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")


@pytest.fixture(autouse=True)
def _clean_train_sim_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("TRAIN_SIM_"):
            monkeypatch.delenv(name)
