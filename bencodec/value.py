"""
The four bencode value shapes. Integer and ByteString are int and bytes subclasses,
List and Dictionary are UserList and UserDict subclasses, so a decoded tree can be used
like plain python data while still carrying its variant.
"""

from collections import UserDict, UserList
from typing import Any, Dict, List as _List, Union

from .errors import UnsupportedType

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


class Value:
    __slots__ = ()
    tag = ''  # type: str

    @property
    def payload(self) -> Any:
        raise NotImplementedError


class Integer(Value, int):
    tag = 'integer'

    def __new__(cls, value=0):
        if not isinstance(value, int) or isinstance(value, bool):
            raise UnsupportedType(value)
        self = super().__new__(cls, value)
        if not INT64_MIN <= self <= INT64_MAX:
            raise OverflowError(f'{int(self)} does not fit in a signed 64-bit integer')
        return self

    @property
    def payload(self) -> int:
        return int(self)

    def __repr__(self):
        return f'Integer({int(self)})'


class ByteString(Value, bytes):
    tag = 'bytestring'

    @property
    def payload(self) -> bytes:
        return bytes(self)

    def __repr__(self):
        return f'ByteString({bytes(self)!r})'


class List(Value, UserList):
    tag = 'list'

    def __init__(self, initlist=None):
        super().__init__()
        if initlist is not None:
            self.data.extend(to_value(item) for item in initlist)

    def __setitem__(self, i, item):
        if isinstance(i, slice):
            self.data[i] = [to_value(x) for x in item]
        else:
            self.data[i] = to_value(item)

    def append(self, item):
        self.data.append(to_value(item))

    def insert(self, i, item):
        self.data.insert(i, to_value(item))

    def extend(self, other):
        self.data.extend(to_value(item) for item in other)

    def __iadd__(self, other):
        self.extend(other)
        return self

    @property
    def payload(self) -> list:
        return [item.payload for item in self.data]

    def __repr__(self):
        return f'List({self.data!r})'


def _key(key: Union[str, bytes]) -> str:
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).decode()
    if not isinstance(key, str):
        raise TypeError(f'Dictionary key must be str or utf-8 bytes, not {type(key).__name__}')
    key.encode()  # lone surrogates cannot be serialized
    return key


def key_order(key: str) -> bytes:
    """Sort key for canonical order: the raw utf-8 bytes of the key."""
    return key.encode()


class Dictionary(Value, UserDict):
    """
    Keys are str and always iterate in ascending utf-8 byte order.
    bytes keys are accepted for lookups, so ``torrent[b'info']`` works as well as ``torrent['info']``.
    """
    tag = 'dictionary'

    def __getitem__(self, key):
        return self.data[_key(key)]

    def __setitem__(self, key, item):
        self.data[_key(key)] = to_value(item)

    def __delitem__(self, key):
        del self.data[_key(key)]

    def __contains__(self, key):
        try:
            return _key(key) in self.data
        except (TypeError, UnicodeError):
            return False

    def __iter__(self):
        return iter(sorted(self.data, key=key_order))

    def get(self, key, default=None):
        if key in self:
            return self[key]
        return default

    def setdefault(self, key, default=None):
        key = _key(key)
        if key not in self.data:
            self.data[key] = to_value(default)
        return self.data[key]

    def __ior__(self, other):
        self.update(other)
        return self

    @property
    def payload(self) -> dict:
        return {key: self.data[key].payload for key in self}

    def __repr__(self):
        return 'Dictionary({%s})' % ', '.join(f'{key!r}: {self.data[key]!r}' for key in self)


type_payload = Union[int, bytes, str, _List[Any], Dict[Union[str, bytes], Any]]


def to_value(obj: Union[Value, type_payload]) -> Value:
    """
    Converts plain python data into a Value tree, str is stored as its utf-8 bytes.
    Raises:
        UnsupportedType: bool, None, float or anything else with no bencode form
        OverflowError: int out of the signed 64-bit range
    """
    if isinstance(obj, Value):
        return obj
    t = type(obj)
    if t is int:
        return Integer(obj)
    elif t is bytes or t is bytearray:
        return ByteString(obj)
    elif t is str:
        return ByteString(obj.encode())
    elif t is list or t is tuple:
        return List(obj)
    elif t is dict:
        return Dictionary(obj)
    raise UnsupportedType(obj)
