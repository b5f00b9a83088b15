"""
Exceptions raised by the decoder and the encoder.
Every decode error knows how many bytes had been consumed when it was detected (``offset``).
"""


class BdecodeError(Exception):
    def __init__(self, msg: str = '', offset: int = -1):
        self.offset = offset
        if offset >= 0:
            msg = f'{msg} (offset {offset})'
        super().__init__(msg)


class BencodeError(Exception):
    pass


class IOFault(BdecodeError, BencodeError):
    """The byte source or sink raised an OSError, which is kept as ``__cause__``."""


class EndOfInput(BdecodeError):
    pass


class NotANumber(BdecodeError):
    pass


class EmptyNumber(BdecodeError):
    pass


class IntegerOverflow(BdecodeError):
    pass


class DictionaryKeyNotString(BdecodeError):
    def __init__(self, value, offset: int = -1):
        self.value = value
        super().__init__(f'Dictionary key must be a byte string, got {value!r}', offset)


class DictionaryValueMissing(BdecodeError):
    def __init__(self, key: str, offset: int = -1):
        self.key = key
        super().__init__(f'No value follows dictionary key {key!r}', offset)


class InvalidKeyEncoding(BdecodeError):
    def __init__(self, raw: bytes, offset: int = -1):
        self.raw = raw
        super().__init__(f'Dictionary key {raw!r} is not valid utf-8', offset)


class UnrecognizedTag(BdecodeError):
    def __init__(self, tag: bytes, offset: int = -1):
        self.tag = tag
        super().__init__(f'Unrecognized leading byte {tag!r}', offset)


class NestingTooDeep(BdecodeError):
    def __init__(self, depth: int, offset: int = -1):
        self.depth = depth
        super().__init__(f'Nesting deeper than {depth} levels', offset)


class UnsupportedType(BencodeError, TypeError):
    def __init__(self, obj):
        self.obj = obj
        super().__init__(f'Unsupported type for bencoding: {type(obj).__name__}')
