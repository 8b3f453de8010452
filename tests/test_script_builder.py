# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from jobgen_lib.properties.directive import Directive
from jobgen_lib.properties.job_spec import (
    EmailNotification,
    ExtraOptions,
    GpuRequest,
    JobSpecification,
)
from jobgen_lib.script.builder import DirectiveBuilder

FULL_EXTRA = ExtraOptions(
    memory_mb=32000,
    constraints="intel",
    exclusive=True,
    gpu=GpuRequest(count="2", gpu_type="a100"),
    account="proj1",
    qos="high",
    array_indices="1-10",
    dependency="afterok:123",
    environment_variables=("A=1",),
    modules=("gcc",),
)

OPTIONAL_KEYS = {
    "mem",
    "constraint",
    "exclusive",
    "gpus-per-node",
    "gres",
    "account",
    "qos",
    "array",
    "dependency",
}


def _spec(**kwargs) -> JobSpecification:
    values = {
        "job_name": "myjob",
        "partition": "compute",
        "num_nodes": 4,
        "tasks_per_node": 8,
    }
    values.update(kwargs)
    return JobSpecification(**values)


def _keys(directives: list[Directive]) -> list[str]:
    return [d.key for d in directives]


def test_build_required_directives_in_order():
    directives = DirectiveBuilder.build(_spec(), extra_mode=False)

    assert directives == [
        Directive("job-name", "myjob"),
        Directive("partition", "compute"),
        Directive("nodes", "4"),
        Directive("ntasks-per-node", "8"),
        Directive("output", "slurm-%j.out"),
    ]


def test_build_time_limit_only_when_provided():
    assert "time" not in _keys(DirectiveBuilder.build(_spec(), False))

    directives = DirectiveBuilder.build(_spec(time_limit="1:00:00"), False)
    assert directives[5] == Directive("time", "1:00:00")


def test_build_mail_directives_as_pair():
    spec = _spec(time_limit="1:00:00", email=EmailNotification("a@b.c"))
    directives = DirectiveBuilder.build(spec, False)

    assert _keys(directives)[5:] == ["time", "mail-user", "mail-type"]
    assert directives[6] == Directive("mail-user", "a@b.c")
    assert directives[7] == Directive("mail-type", "END,FAIL")


def test_build_no_mail_directives_without_email():
    keys = _keys(DirectiveBuilder.build(_spec(), True))

    assert "mail-user" not in keys
    assert "mail-type" not in keys


def test_build_full_extra_order():
    spec = _spec(
        time_limit="1:00:00",
        email=EmailNotification("a@b.c", ("ALL",)),
        extra=FULL_EXTRA,
    )
    directives = DirectiveBuilder.build(spec, extra_mode=True)

    assert _keys(directives) == [
        "job-name",
        "partition",
        "nodes",
        "ntasks-per-node",
        "output",
        "time",
        "mail-user",
        "mail-type",
        "mem",
        "constraint",
        "exclusive",
        "gpus-per-node",
        "gres",
        "account",
        "qos",
        "array",
        "dependency",
    ]
    assert Directive("mem", "32000") in directives
    assert Directive("exclusive") in directives
    assert Directive("gres", "gpu:a100:2") in directives
    assert Directive("dependency", "afterok:123") in directives


def test_build_keys_are_unique():
    spec = _spec(extra=ExtraOptions(constraints="intel", cpu_architecture="zen3"))
    keys = _keys(DirectiveBuilder.build(spec, True))

    assert len(keys) == len(set(keys))


def test_build_without_extra_mode_ignores_extra_options():
    spec = _spec(extra=FULL_EXTRA)
    keys = set(_keys(DirectiveBuilder.build(spec, extra_mode=False)))

    assert not keys & OPTIONAL_KEYS


def test_build_extra_mode_without_extra_options():
    assert DirectiveBuilder.build(_spec(), True) == DirectiveBuilder.build(_spec(), False)


def test_build_unset_memory_is_omitted():
    keys = _keys(DirectiveBuilder.build(_spec(extra=ExtraOptions()), True))
    assert "mem" not in keys


def test_build_cpu_architecture_overwrites_constraints():
    spec = _spec(extra=ExtraOptions(constraints="intel,avx2", cpu_architecture="zen3"))
    directives = DirectiveBuilder.build(spec, True)

    assert [d for d in directives if d.key == "constraint"] == [
        Directive("constraint", "zen3")
    ]


def test_build_cpu_architecture_alone_sets_constraint():
    spec = _spec(extra=ExtraOptions(cpu_architecture="zen3"))
    assert Directive("constraint", "zen3") in DirectiveBuilder.build(spec, True)


def test_build_exclusive_false_is_omitted():
    spec = _spec(extra=ExtraOptions(exclusive=False))
    assert "exclusive" not in _keys(DirectiveBuilder.build(spec, True))


@pytest.mark.parametrize(
    "gpu,expected",
    [
        (GpuRequest(count="2", gpu_type="a100"), [("gpus-per-node", "2"), ("gres", "gpu:a100:2")]),
        (GpuRequest(count="4", gpu_type=None), [("gpus-per-node", "4")]),
        (GpuRequest(count=None, gpu_type="v100"), [("gres", "gpu:v100:1")]),
        (GpuRequest(count=None, gpu_type=None), []),
    ],
)
def test_build_gpu_directives(gpu, expected):
    directives = DirectiveBuilder.build(_spec(extra=ExtraOptions(gpu=gpu)), True)
    gpu_directives = [
        (d.key, d.value) for d in directives if d.key in ("gpus-per-node", "gres")
    ]

    assert gpu_directives == expected


def test_build_empty_free_text_options_are_omitted():
    spec = _spec(extra=ExtraOptions(account="", qos="", array_indices="", dependency=""))
    keys = _keys(DirectiveBuilder.build(spec, True))

    assert not {"account", "qos", "array", "dependency"} & set(keys)


def test_build_is_deterministic():
    spec = _spec(time_limit="2:00:00", email=EmailNotification("a@b.c"), extra=FULL_EXTRA)

    assert DirectiveBuilder.build(spec, True) == DirectiveBuilder.build(spec, True)
