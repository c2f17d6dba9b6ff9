'''Conversion of records and query results to JSON-ready structures.

Classes decorated with :func:`simple_serialization` get a ``to_dict()``
method; :func:`to_dict` and :func:`to_json` then serialize any nesting of
such objects, lists, tuples and dictionaries.
'''

import json
import inspect
from typing import Any, List, Dict


ZERO_PARAMS: List[str] = ['args', 'kwargs']


def simple_serialization(class_: type) -> type:
    '''A decorator to provide a simple to_dict() serialization method.

    The resulting method will serialize all object attributes corresponding
    to the class's constructor parameter names, plus any names listed in
    the class's ``serialize_extra`` attribute (e.g. derived properties).
    Therefore, this decorator is only useful when the class stores all its
    original parameters unchanged.

    :param class_: The class to add the method to.
    '''
    if hasattr(class_, 'serialize_params'):
        param_names = list(class_.serialize_params)
    else:
        param_names = list(inspect.signature(
            class_.__init__
        ).parameters.keys())
        if 'self' in param_names:
            param_names.remove('self')
        if param_names == ZERO_PARAMS and class_.__init__ == object.__init__:
            param_names = []
    param_names += list(getattr(class_, 'serialize_extra', ()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            attr: serialize_value(getattr(self, attr))
            for attr in param_names
        }

    class_.to_dict = to_dict
    return class_


def serialize_value(value: Any) -> Any:
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    elif isinstance(value, tuple(ATOMIC_TYPES)):
        return value
    elif hasattr(value, '__iter__'):
        if hasattr(value, 'items') and hasattr(value, 'keys'):
            return {
                str(key): serialize_value(val)
                for key, val in value.items()
            }
        else:
            return [serialize_value(val) for val in value]
    else:
        raise ValueError(f'cannot serialize {value!r} to dict format')


def to_dict(obj: Any) -> Any:
    """Serialize a record, query result or a collection of them.

    :param obj: An object providing a `to_dict()` method (records and all
        query results have it, courtesy of the simple_serialization
        decorator), or a list or dictionary of such objects.
    """
    return serialize_value(obj)


def to_json(obj: Any, **kwargs) -> str:
    """Serialize the object to a JSON string.

    :param obj: Anything accepted by :func:`to_dict`.
    :param kwargs: Passed to :func:`json.dumps`.
    """
    return json.dumps(to_dict(obj), **kwargs)


ATOMIC_TYPES: List[type] = [
    str, int, float, bool, type(None),
]

