"""Tests for ExampleClientAdapter (template/reference adapter)."""

import json

from plagcheck.collaborators.example_client_adapter import ExampleClientAdapter


class TestExampleClientAdapter:
    def test_implements_base_contract(self) -> None:
        adapter = ExampleClientAdapter()
        result = adapter.create_chat_completion(
            model="any",
            temperature=0.0,
            system_prompt="sys",
            user_prompt="user",
        )
        assert isinstance(result, str)
        parsed = json.loads(result)
        assert "similarity" in parsed
        assert "likelihood" in parsed
        assert "verdict" in parsed

    def test_default_judgment(self) -> None:
        data = json.loads(
            ExampleClientAdapter().create_chat_completion(
                model="x", temperature=0.1, system_prompt="", user_prompt=""
            )
        )
        assert data["similarity"] == 0.0
        assert data["likelihood"] == 0.2
        assert data["verdict"] == "likely_human"

    def test_custom_response(self) -> None:
        adapter = ExampleClientAdapter(response={"similarity": 0.9})
        result = adapter.create_chat_completion(
            model="x", temperature=0.0, system_prompt="", user_prompt=""
        )
        assert json.loads(result) == {"similarity": 0.9}

    def test_ignores_input_parameters(self) -> None:
        adapter = ExampleClientAdapter()
        r1 = adapter.create_chat_completion(
            model="a", temperature=0.0, system_prompt="s1", user_prompt="u1"
        )
        r2 = adapter.create_chat_completion(
            model="b", temperature=1.0, system_prompt="s2", user_prompt="u2"
        )
        assert r1 == r2
