"""
world.py: Entity/component storage, resources and event queues.

Entities are plain integer ids. Components are stored per type, so a query
walks the smallest pool and checks the others by id.
"""

from collections import defaultdict
from typing import Any, Dict, Iterator, List, Tuple, Type, TypeVar

T = TypeVar("T")


class World:
    """Holds every entity, resource and pending event of a running game."""

    def __init__(self):
        self._next_id = 0
        self._alive: set = set()
        self._pools: Dict[type, Dict[int, Any]] = defaultdict(dict)
        self._resources: Dict[type, Any] = {}
        self._events: Dict[type, List[Any]] = defaultdict(list)

    # ----------------- Entities -----------------

    def spawn(self, *components) -> int:
        """Creates an entity with the given components and returns its id."""
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        for component in components:
            self.attach(eid, component)
        return eid

    def attach(self, eid: int, component):
        if eid not in self._alive:
            raise KeyError(f"entity {eid} does not exist")
        self._pools[type(component)][eid] = component

    def despawn(self, eid: int):
        """Removes an entity and all its components. Unknown ids are ignored."""
        if eid not in self._alive:
            return
        self._alive.discard(eid)
        for pool in self._pools.values():
            pool.pop(eid, None)

    def is_alive(self, eid: int) -> bool:
        return eid in self._alive

    def entities(self) -> List[int]:
        return sorted(self._alive)

    def get(self, eid: int, component_type: Type[T]) -> T:
        """Returns the component or None when the entity lacks it."""
        return self._pools[component_type].get(eid)

    def has(self, eid: int, component_type: type) -> bool:
        return eid in self._pools[component_type]

    # ----------------- Queries -----------------

    def query(self, *component_types: type) -> Iterator[Tuple[int, tuple]]:
        """
        Yields (eid, (component, ...)) for entities holding every type.
        The match set is taken up front, so systems may despawn while iterating.
        """
        if not component_types:
            return iter(())
        pools = [self._pools[t] for t in component_types]
        smallest = min(pools, key=len)
        matches = [
            (eid, tuple(pool[eid] for pool in pools))
            for eid in sorted(smallest)
            if all(eid in pool for pool in pools)
        ]
        return iter(matches)

    def query_ids(self, *component_types: type) -> List[int]:
        return [eid for eid, _ in self.query(*component_types)]

    def count(self, *component_types: type) -> int:
        return len(self.query_ids(*component_types))

    def single(self, *component_types: type) -> Tuple[int, tuple]:
        """Returns the one match of a query; raises LookupError otherwise."""
        matches = list(self.query(*component_types))
        if len(matches) != 1:
            names = ", ".join(t.__name__ for t in component_types)
            raise LookupError(f"expected one entity with ({names}), found {len(matches)}")
        return matches[0]

    # ----------------- Resources -----------------

    def insert_resource(self, resource):
        self._resources[type(resource)] = resource

    def resource(self, resource_type: Type[T]) -> T:
        return self._resources[resource_type]

    # ----------------- Events -----------------

    def send(self, event):
        self._events[type(event)].append(event)

    def drain(self, event_type: Type[T]) -> List[T]:
        """Returns and clears every pending event of the given type."""
        return self._events.pop(event_type, [])

    def pending(self, event_type: type) -> int:
        return len(self._events.get(event_type, ()))
