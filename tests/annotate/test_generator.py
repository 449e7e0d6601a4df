"""Tests for AnnotationGenerator."""

import pytest

from arc_git.ai.prompts import ANNOTATE_COMMIT_MODEL
from arc_git.annotate.generator import AnnotationGenerator
from arc_git.exceptions import GenerationError

from conftest import FakeClient, make_commit


class TestAnnotationGenerator:
    def test_trims_response(self):
        generator = AnnotationGenerator(FakeClient())
        commit = make_commit(1)
        assert generator.generate(commit, "+x") == f"Explains commit {commit.short_hash}."

    def test_default_and_override_model(self):
        client = FakeClient()
        AnnotationGenerator(client).generate(make_commit(1), "+x")
        AnnotationGenerator(client, model="gpt-4o").generate(make_commit(2), "+x")
        assert [c["model"] for c in client.calls] == [ANNOTATE_COMMIT_MODEL, "gpt-4o"]

    def test_prompt_uses_short_hash_and_metadata(self):
        client = FakeClient()
        commit = make_commit(7, message="speed up log parsing")
        AnnotationGenerator(client).generate(commit, "+fast")
        prompt = client.calls[0]["prompt"]
        assert f"Commit: {commit.short_hash}\n" in prompt
        assert commit.hash not in prompt
        assert "Message: speed up log parsing" in prompt
        assert f"Author: {commit.author}" in prompt

    def test_full_diff_by_default(self):
        client = FakeClient()
        diff = "+" + "x" * 50_000
        AnnotationGenerator(client).generate(make_commit(1), diff)
        assert diff in client.calls[0]["prompt"]

    def test_truncates_when_limit_set(self):
        client = FakeClient()
        diff = "+" + "x" * 999
        AnnotationGenerator(client, max_diff_chars=100).generate(make_commit(1), diff)
        prompt = client.calls[0]["prompt"]
        assert diff not in prompt
        assert "[diff truncated: 100 of 1000 characters shown]" in prompt

    def test_blank_response_is_error(self):
        generator = AnnotationGenerator(FakeClient(text="   \n"))
        with pytest.raises(GenerationError, match="empty response"):
            generator.generate(make_commit(1), "+x")

    def test_backend_error_propagates(self):
        commit = make_commit(1)
        generator = AnnotationGenerator(FakeClient(fail_for={commit.short_hash}))
        with pytest.raises(GenerationError, match="rate limited"):
            generator.generate(commit, "+x")
