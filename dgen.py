'''
seeded fake records for exercising flinq queries.

a schema is a plain python structure:
  - 'word', 'name', ...             -> a faker provider called with no arguments
  - ('pyint', {'min_value': 1})     -> a faker provider called with keyword arguments
  - {'_qen_provider': ..., ...}     -> one of the built-in providers below
  - {'field': schema, ...}          -> a record whose fields are generated in order
  - [item_schema]                   -> a list of records (count from '_qen_count')
  - anything else                   -> returned as a literal
'''

from typing import Any, Dict, Optional
import numpy as np
from faker import Faker
from flinq import from_iterable, Queryable


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[str, int] = {}

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _builtin(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # index with the seeded rng so the picked value keeps its python type
            return config["from"][int(self._rng.integers(len(config["from"])))]

        if provider == "sequence":
            # a running counter per name, handy for unique ids
            name = config.get("name", "default")
            self._counters[name] = self._counters.get(name, config.get("start", 1) - 1) + 1
            return self._counters[name]

        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._builtin(schema, context)
            record = {}
            for field, field_schema in schema.items():
                # earlier sibling fields are visible to refs
                record[field] = self.create(field_schema, {**context, **record})
            return record

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._count_for(item_schema)
            if isinstance(item_schema, dict):
                item_schema = item_schema.get('_qen_items', item_schema)
            return [self.create(item_schema, context) for _ in range(count)]

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_faker(schema)

        return schema

    def _count_for(self, item_schema: Any) -> int:
        if not isinstance(item_schema, dict) or "_qen_count" not in item_schema:
            return 5
        count = item_schema["_qen_count"]
        if isinstance(count, (list, tuple)):
            low, high = count
            return int(self._rng.integers(low, high, endpoint=True))
        return count


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Queryable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
