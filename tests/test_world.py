"""
Tests for the entity world.
"""

import pytest

from flappy_circle.data_models import GameOverEvent, Player, RestartEvent, Transform, Velocity
from flappy_circle.world import World


class TestEntities:
    """Spawning, querying and despawning."""

    def test_spawn_assigns_increasing_ids(self):
        world = World()
        a = world.spawn(Transform())
        b = world.spawn(Transform())
        assert b > a
        assert world.entities() == [a, b]

    def test_query_matches_all_component_types(self):
        world = World()
        moving = world.spawn(Transform(1, 2), Velocity(3, 4))
        world.spawn(Transform(5, 6))

        matches = list(world.query(Transform, Velocity))
        assert len(matches) == 1
        eid, (transform, velocity) = matches[0]
        assert eid == moving
        assert (transform.x, velocity.vy) == (1, 4)

    def test_despawn_removes_components(self):
        world = World()
        eid = world.spawn(Transform(), Player())
        world.despawn(eid)
        assert not world.is_alive(eid)
        assert world.get(eid, Transform) is None
        assert world.count(Player) == 0

    def test_despawn_unknown_entity_is_ignored(self):
        world = World()
        world.despawn(42)
        assert world.entities() == []

    def test_despawn_while_iterating(self):
        world = World()
        for i in range(3):
            world.spawn(Transform(i))
        for eid, _ in world.query(Transform):
            world.despawn(eid)
        assert world.count(Transform) == 0

    def test_attach_to_missing_entity_raises(self):
        world = World()
        with pytest.raises(KeyError):
            world.attach(7, Player())

    def test_single_requires_exactly_one_match(self):
        world = World()
        with pytest.raises(LookupError):
            world.single(Player)

        eid = world.spawn(Player(), Transform())
        assert world.single(Player)[0] == eid

        world.spawn(Player())
        with pytest.raises(LookupError):
            world.single(Player)


class TestEvents:
    """Event queues are drained on read."""

    def test_drain_returns_and_clears(self):
        world = World()
        world.send(GameOverEvent())
        world.send(GameOverEvent())
        assert world.pending(GameOverEvent) == 2
        assert len(world.drain(GameOverEvent)) == 2
        assert world.drain(GameOverEvent) == []

    def test_event_types_are_separate(self):
        world = World()
        world.send(RestartEvent())
        assert world.drain(GameOverEvent) == []
        assert len(world.drain(RestartEvent)) == 1
