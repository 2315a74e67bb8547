from types import MappingProxyType


class KnownDict:

    """A closed table of protocol elements, keyed by the elements themselves.

    Each item is a dict whose ``_`` is the key (such as ``StatusCode(404)``).
    Every item also gets a Python identifier (such as ``NOT_FOUND``),
    derived from its ``_title`` unless given explicitly as ``_name``,
    which allows attribute access: ``known.NOT_FOUND``.

    The table is checked when constructed and cannot be changed afterwards.
    """

    def __init__(self, cls, items, extra_info=None):
        self.cls = cls
        allowed_info = set(['_', '_citations', '_description', '_name',
                            '_no_sync', '_title'] + (extra_info or []))
        by_key = {}
        by_name = {}
        for item in items:
            assert set(item).issubset(allowed_info)
            key = item['_']
            assert isinstance(key, cls)
            assert key not in by_key
            by_key[key] = MappingProxyType(dict(item))
            name = self._name_for(item)
            assert name.isidentifier()
            assert name not in by_name
            by_name[name] = key
        self._by_key = MappingProxyType(by_key)
        self._by_name = MappingProxyType(by_name)

    def __getattr__(self, name):
        if not name.startswith('_') and name in self._by_name:
            return self._by_name[name]
        else:
            raise AttributeError(name)

    def __getitem__(self, key):
        return self._by_key[key]

    def __iter__(self):
        return iter(self._by_key)

    def __contains__(self, key):
        return key in self._by_key

    def __len__(self):
        return len(self._by_key)

    def get_info(self, key):
        return self._by_key.get(key, {})

    def key_for(self, name):
        return self._by_name.get(name)

    def name_for(self, key):
        return self._name_for(self._by_key[key])

    @classmethod
    def _name_for(cls, item):
        if '_name' in item:
            return item['_name']
        name = (item['_title'].
                replace('-', ' ').replace(' ', '_').replace('/', '_').
                replace('+', '_').replace('.', '_').replace("'", '').
                upper())
        return name
