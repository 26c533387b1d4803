#
# rgbfusion - Copyright (C) 2026 The rgbfusion Authors
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#

# pylint: disable=no-member,protected-access

from collections import OrderedDict
from collections.abc import Iterable
from enum import Enum

from ruamel.yaml import YAML


class Configuration:
    """
    Configuration hierarchy

    This is a read-only hierarchical object with attribute access.
    When a null attribute is queried, ask for the parent recursively.
    Supports key search and is loaded from YAML. Attributes are
    forcibly coerced to the desired types on load.

    Call "create" to generate a derived type.
    """
    __slots__ = ()


    @classmethod
    def create(cls, name: str, fields: list):
        """
        Derive a new Configuration class type.

        :param name: Name of the new type
        :param fields: List of fields and types

        :return: The derived Configuration class
        """
        field_names = [n for n, t in fields]

        derived = cls.__class__(name, (cls, object), \
            {'__slots__': (*field_names, 'parent', '_children'),
             '_yaml_cache': {},
             '_field_types': dict(fields)})

        return derived


    def __init__(self, parent=None, **kwargs):
        slots = self.__slots__
        if 'parent' not in slots:
            raise TypeError('Call create() to create a derived Configuration')

        for k in slots:
            object.__setattr__(self, k, kwargs.get(k))

        object.__setattr__(self, 'parent', parent)
        if isinstance(parent, Configuration):
            parent._add_child(self)


    def __str__(self):
        clsname = self.__class__.__name__
        values = ', '.join('%s=%r' % (k, getattr(self, k)) \
            for k in self.__slots__ if k not in ('parent', '_children') \
                and getattr(self, k) is not None)

        return '%s(%s)' % (clsname, values)


    __repr__ = __str__


    @property
    def children(self) -> tuple:
        """
        Children which inherit properties of this instance
        """
        return self._children


    def _add_child(self, child):
        if self._children is None:
            object.__setattr__(self, '_children', (child,))
        else:
            object.__setattr__(self, '_children', (*self._children, child))


    def __setattr__(self, name, value):
        raise AttributeError('\'%s\' object is read-only (attr=\'%s\')' % \
            (self.__class__.__name__, name))


    def __getattribute__(self, key):
        item = object.__getattribute__(self, key)

        if item is not None or key in ('parent', 'children') or key.startswith('_'):
            return item

        parent = object.__getattribute__(self, 'parent')
        if parent is not None:
            return getattr(parent, key)

        return None


    def get(self, key: str, default=None):
        """
        Get a field by name

        :param key: Field name
        :param default: Default value if None
        :return: Value of the field
        """
        if key not in self.__slots__:
            raise AttributeError('Invalid field: %s' % key)
        value = getattr(self, key)
        if value is None:
            return default
        return value


    def search(self, key: str, value) -> list:
        """
        Search for entries in the hierarchy

        :param key: Field name
        :param value: Field value
        :return: The matching entries
        """
        def search_recursive(obj, key, value):
            if obj.get(key) == value:
                yield obj
            if obj.children:
                for child in obj.children:
                    yield from search_recursive(child, key, value)
        return list(search_recursive(self, key, value))


    @classmethod
    def _coerce_types(cls, mapping):
        """
        Convert simple types where necessary and ensure ordering
        """
        odict = OrderedDict()
        for field, field_type in cls._field_types.items():
            if field not in mapping:
                continue
            val = mapping[field]
            if val is None:
                continue

            if field_type is None or isinstance(val, field_type):
                odict[field] = val
                continue

            try:
                if isinstance(val, dict) and issubclass(field_type, dict):
                    odict[field] = field_type(val.items())
                elif isinstance(val, str) and issubclass(field_type, Enum):
                    odict[field] = field_type[val.upper()]
                elif isinstance(val, list):
                    if issubclass(field_type, Enum):
                        odict[field] = tuple([field_type[x.upper()] for x in val])
                    elif issubclass(field_type, tuple):
                        odict[field] = field_type(val)
                    else:
                        odict[field] = tuple([field_type(x) for x in val])
                elif isinstance(val, Iterable) and not isinstance(val, str) \
                        and issubclass(field_type, Iterable):
                    odict[field] = field_type(val)
                else:
                    odict[field] = field_type(val)

            except (KeyError, TypeError, ValueError):
                raise ValueError("Can't coerce %s to type %s (from %s [%s])" %
                                 (field, field_type, val, type(val))) from None

        unknown = set(mapping) - set(cls._field_types) - {'children'}
        if unknown:
            raise ValueError('Unknown fields in %s: %s' % (cls.__name__, ', '.join(sorted(unknown))))

        return odict


    @classmethod
    def load_yaml(cls, filename: str):
        """
        Load a hierarchy of sparse objects from a YAML file.

        :param filename: The filename to open.
        :return: The configuration object hierarchy
        """
        def unpack(mapping, parent=None):
            """
            Recursively create Configuration objects with the parent
            correctly set, returning the top-most parent.
            """
            if mapping is None:
                return None

            mapping = dict(mapping)
            children = mapping.pop('children', None)
            config = cls(parent=parent, **cls._coerce_types(mapping))

            if children:
                for child in children:
                    unpack(child, parent=config)
            return config

        if filename in cls._yaml_cache:
            return cls._yaml_cache[filename]

        with open(filename, 'r') as yaml_file:
            data = unpack(YAML(typ='safe').load(yaml_file))

        if data is not None:
            cls._yaml_cache[filename] = data

        return data
