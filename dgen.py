'''
seeded record generator for exercising queries against realistic data.

a schema is plain python data:
  'word'                                  -> faker provider called with no arguments
  ('pyint', {'min_value': 1})             -> faker provider called with kwargs
  {'_qen_provider': 'choice', 'from': []} -> numpy rng choice
  {'key': <schema>, ...}                  -> a dict record, each value generated in turn
anything else is returned as a literal.
'''

import numpy as np
from faker import Faker
from queryable import from_iterable
from typing import Any, Dict, Iterator, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_provider(self, name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            provider = getattr(self._fake, name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{name}'")
        return provider(**(kwargs or {}))

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if schema.get('_qen_provider') == 'choice':
                picked = self._rng.choice(schema['from'])
                # numpy scalars back to native python values
                return picked.item() if hasattr(picked, 'item') else picked
            if '_qen_provider' in schema:
                raise ValueError(f"unknown _qen_provider: '{schema['_qen_provider']}'")
            return {key: self.create(value) for key, value in schema.items()}

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_provider(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_provider(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> list:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int):
        """a query handle over count freshly generated records"""
        return from_iterable(self.records(count))

    def stream(self, count: int) -> Iterator[Any]:
        """a one-shot generator of records, produced on demand"""
        for _ in range(count):
            yield self._generator.create(self._schema)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
