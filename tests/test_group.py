"""Tests for create_echo_props — batch creation over a mapping."""

import pytest

from echoprop import EchoConfig, create_echo_props, create_reactive_properties


class Game:
    pass


class TestCreateEchoProps:
    def test_creates_in_mapping_order(self):
        game = Game()
        props = create_echo_props(game, {"score": 0, "health": 100, "lives": 3})
        assert [p.name for p in props] == ["score", "health", "lives"]
        assert [p.value for p in props] == [0, 100, 3]

    def test_emits_initial_values_and_updates(self):
        game = Game()
        create_echo_props(game, {"score": 0, "health": 100})
        score_values, health_values = [], []
        getattr(game, "score$").subscribe(score_values.append)
        getattr(game, "health$").subscribe(health_values.append)
        assert score_values == [0]
        assert health_values == [100]

        game.score = 10
        game.health = 90

        assert score_values == [0, 10]
        assert health_values == [100, 90]

    def test_properties_are_independent(self):
        game = Game()
        score, health = create_echo_props(game, {"score": 0, "health": 100})
        health_values = []
        health.subscribe(health_values.append)
        game.score = 5
        game.score = 6
        assert health_values == [100]
        score.complete()
        game.health = 50
        assert health_values == [100, 50]

    def test_shared_options(self):
        game = Game()
        score, health = create_echo_props(
            game, {"score": 0, "health": 100}, validate=lambda new, old: new >= 0
        )
        game.score = -1
        game.health = -1
        assert (game.score, game.health) == (0, 100)
        game.score = 1
        assert score.value == 1
        assert health.value == 100

    def test_shared_config_object(self):
        game = Game()
        config = EchoConfig(add_as_observable_to_target=False)
        create_echo_props(game, {"a": 1, "b": 2}, config)
        assert not hasattr(game, "a$")
        assert not hasattr(game, "b$")

    def test_empty_mapping(self):
        assert create_echo_props(Game(), {}) == []

    def test_adopts_existing_values(self):
        game = Game()
        game.score = 99
        (score,) = create_echo_props(game, {"score": None})
        assert score.value == 99


class TestDeprecatedAlias:
    def test_alias_warns_and_works(self):
        game = Game()
        with pytest.warns(DeprecationWarning):
            props = create_reactive_properties(game, {"x": 1})
        game.x = 2
        assert props[0].value == 2
