# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from jobgen_lib.catalog.interface import CatalogInterface
from jobgen_lib.core.error import JobgenCatalogError, JobgenError
from jobgen_lib.prompt.interface import PromptChannelInterface
from jobgen_lib.properties.partition import PartitionProfile


class ScriptedChannel(PromptChannelInterface):
    """Prompt channel answering questions from a predefined list."""

    def __init__(self, answers: list[str], block: str = ""):
        self.answers = list(answers)
        self.block = block
        self.questions: list[str] = []
        self.shown: list[object] = []
        self.infos: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise JobgenError(f"Input ended before answering '{question}'.")
        return self.answers.pop(0)

    def askBlock(self, question: str) -> str:
        self.questions.append(question)
        return self.block

    def show(self, renderable) -> None:
        self.shown.append(renderable)

    def info(self, message: str) -> None:
        self.infos.append(message)


class FakeCatalog(CatalogInterface):
    """In-memory resource catalog."""

    def __init__(
        self,
        profiles: list[PartitionProfile],
        constraints: list[str] | None = None,
        gpu_types: list[str] | None = None,
        accounts: list[str] | None = None,
        qos: list[str] | None = None,
        modules: list[str] | None = None,
    ):
        self.profiles = {p.name: p for p in profiles}
        self.constraints = constraints or []
        self.gpu_types = gpu_types or []
        self.accounts = accounts or []
        self.qos = qos or []
        self.modules = modules or []
        self.requested_profiles: list[str] = []
        self.accounts_user: str | None = None

    def listPartitions(self) -> list[str]:
        if not self.profiles:
            raise JobgenCatalogError("Could not fetch partition information.")
        return sorted(self.profiles)

    def getPartitionProfile(self, name: str) -> PartitionProfile:
        self.requested_profiles.append(name)
        return self.profiles[name]

    def listConstraints(self) -> list[str]:
        return self.constraints

    def listGpuTypes(self) -> list[str]:
        return self.gpu_types

    def listAccounts(self, user: str) -> list[str]:
        self.accounts_user = user
        return self.accounts

    def listQosNames(self) -> list[str]:
        return self.qos

    def listModules(self) -> list[str]:
        return self.modules


@pytest.fixture
def compute_profile():
    return PartitionProfile("compute", 10, 16, 64000, "2-00:00:00")


@pytest.fixture
def catalog(compute_profile):
    return FakeCatalog(
        [compute_profile, PartitionProfile("gpu", 2, 64, 256000, "1-00:00:00")]
    )
