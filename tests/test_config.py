from __future__ import annotations

from pathlib import Path

import pytest

from periodical_nav.config import policy_from_env
from periodical_nav.tree.types import GroupingPolicy

ENV_KEYS = ("PERIODICAL_NAV_LEAF_TYPE", "PERIODICAL_NAV_DATE_FORMAT", "PERIODICAL_NAV_PRUNE")


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    for k in ENV_KEYS:
        monkeypatch.delenv(k, raising=False)
    return tmp_path


def test_policy_from_env_defaults(clean_env: Path) -> None:
    assert policy_from_env() == GroupingPolicy()


def test_policy_from_env_overrides(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PERIODICAL_NAV_LEAF_TYPE", "issue")
    monkeypatch.setenv("PERIODICAL_NAV_DATE_FORMAT", "%d/%m/%Y")
    monkeypatch.setenv("PERIODICAL_NAV_PRUNE", "no")

    policy = policy_from_env()
    assert policy.leaf_type == "issue"
    assert policy.date_label_format == "%d/%m/%Y"
    assert policy.prune_empty_decades is False
