"""Tests for definition module."""
from clickerengine.definition import GameConfig, GameDefinition
from clickerengine.generator import GeneratorDef

from conftest import make_definition


def test_valid_definition():
    assert make_definition().validate() == []


def test_lookup():
    defn = make_definition()
    assert defn.get_generator("A").display_name == "Alpha"
    assert defn.get_generator("missing") is None
    assert defn.generator_ids() == ["A", "B"]


def test_display_name_defaults_to_id():
    assert GeneratorDef("cursor", base_cost=1).display_name == "cursor"


def test_duplicate_ids():
    defn = GameDefinition(
        generators=[
            GeneratorDef("a", base_cost=1),
            GeneratorDef("a", base_cost=2),
        ]
    )
    errors = defn.validate()
    assert any("Duplicate generator ID" in e for e in errors)


def test_bad_costs_and_production():
    defn = GameDefinition(
        generators=[
            GeneratorDef("free", base_cost=0, production=1),
            GeneratorDef("drain", base_cost=10, production=-1),
        ]
    )
    errors = defn.validate()
    assert len(errors) == 2
    assert "positive base_cost" in errors[0]
    assert "negative production" in errors[1]


def test_bad_config():
    defn = GameDefinition(
        config=GameConfig(tick_interval=0, click_value=-1, save_key="", score_field="gold"),
    )
    errors = defn.validate()
    assert len(errors) == 4
    assert any("score_field" in e for e in errors)
