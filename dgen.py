r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

test data for lazyq: schema-driven fake records, plus tracked iterables that record
how a sequence is consumed (how many elements were pulled, how many times it
was enumerated, whether the enumeration was closed).
'''

import numpy as np
from faker import Faker
from lazyq import from_iterable, Enumerable
from typing import Any, Dict, Iterable, Iterator, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()
        self._counters: Dict[str, int] = {}

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'") from None
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "sequence":
            # monotonically increasing per name, handy for order assertions
            name = config.get("name", "default")
            value = self._counters.get(name, config.get("start", 0))
            self._counters[name] = value + 1
            return value

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # build the object sequentially so later keys can ref earlier ones
            generated_obj = {}
            for k, v in schema.items():
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, str):
            return self._resolve_faker_method(schema)

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        """materialize `count` records into a re-enumerable sequence"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def stream(self, count: Optional[int] = None) -> 'Tracked':
        """
        records created on demand, one per pull; count=None never ends.
        the returned stream is single-pass and reports how many records were
        actually generated.
        """
        def records():
            produced = 0
            while count is None or produced < count:
                yield self._generator.create(self._schema)
                produced += 1

        return Tracked(records(), single_pass=True)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


# --- consumption tracking ---

class Tracked:
    """
    an iterable that records how it is consumed.

    pulls        elements handed out, across all enumerations
    enumerations walks started over the data
    closed       enumerations that ended, by exhaustion or close()
    finished     enumerations that ran to exhaustion

    with single_pass=True the object is its own iterator, like a generator or
    a database cursor: every iter() continues where the last one stopped, so
    only the first iter() starts a walk.
    """

    def __init__(self, data: Iterable[Any], single_pass: bool = False):
        self._data = data
        self._single_pass = single_pass
        self._shared: Optional[Iterator[Any]] = None
        self.pulls = 0
        self.enumerations = 0
        self.closed = 0
        self.finished = 0
        self.pulled: List[Any] = []

    def __iter__(self) -> Iterator[Any]:
        if self._single_pass:
            if self._shared is None:
                self._shared = self._walk()
                self.enumerations += 1
            return self
        self.enumerations += 1
        return self._walk()

    def __next__(self) -> Any:
        if not self._single_pass:
            raise TypeError("only a single-pass tracked iterable is an iterator")
        if self._shared is None:
            self._shared = self._walk()
            self.enumerations += 1
        return next(self._shared)

    def _walk(self) -> Iterator[Any]:
        try:
            for item in self._data:
                self.pulls += 1
                self.pulled.append(item)
                yield item
            self.finished += 1
        finally:
            self.closed += 1

    @property
    def abandoned(self) -> int:
        return self.closed - self.finished


def tracked(data: Iterable[Any], single_pass: bool = False) -> Tracked:
    return Tracked(data, single_pass=single_pass)
