from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.providers import TextGenerator, UpstreamError


class FakeGenerator(TextGenerator):
    """Records prompts and answers from a canned script."""

    provider_name = "fake"

    def __init__(self, outputs=None, fail_on=None):
        self.prompts = []
        self.outputs = outputs
        self.fail_on = fail_on

    async def generate(self, prompt):
        index = len(self.prompts)
        self.prompts.append(prompt)
        if self.fail_on is not None and index == self.fail_on:
            raise UpstreamError("quota exceeded")
        if self.outputs is not None:
            return self.outputs[index]
        return f"<!DOCTYPE html><html><body>design {index}</body></html>"


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def make_generator():
    return FakeGenerator
