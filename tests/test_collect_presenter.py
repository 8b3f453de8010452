# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import io

from rich.console import Console

from jobgen_lib.collect.presenter import CollectorPresenter
from jobgen_lib.core.config import CFG
from jobgen_lib.properties.partition import PartitionProfile


def _render(renderable) -> str:
    buf = io.StringIO()
    Console(file=buf, force_terminal=False, width=100).print(renderable)
    return buf.getvalue()


def test_create_banner_default_title():
    assert CFG.prompt.title in _render(CollectorPresenter.createBanner())


def test_create_banner_custom_title():
    assert "Advanced Options" in _render(
        CollectorPresenter.createBanner("Advanced Options")
    )


def test_create_partitions_table_uses_one_based_indices():
    output = _render(CollectorPresenter.createPartitionsTable(["compute", "gpu"]))
    lines = [line.split() for line in output.splitlines()]

    assert ["1", "compute"] in lines
    assert ["2", "gpu"] in lines


def test_create_profile_table_lists_limits():
    profile = PartitionProfile("compute", 10, 16, 64000, "2-00:00:00")
    output = _render(CollectorPresenter.createProfileTable(profile))

    assert "compute" in output
    assert "Maximum nodes:" in output
    assert "10" in output
    assert "64000 MB" in output
    assert "2-00:00:00" in output


def test_create_catalog_hint_joins_items():
    hint = CollectorPresenter.createCatalogHint("Available QOS options", ["a", "b"], " ")
    assert hint.plain == "Available QOS options: a b"
