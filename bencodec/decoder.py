"""
Recursive descent bencode decoder with one byte of lookahead. See https://www.bittorrent.org/beps/bep_0003.html.
The source is anything with a ``read(n)`` method, it is read one byte at a time so that
nothing after the end of the decoded value is consumed.
"""

from typing import BinaryIO, Iterator, Optional

from loguru import logger

from . import config
from .errors import (
    DictionaryKeyNotString, DictionaryValueMissing, EmptyNumber, EndOfInput, IntegerOverflow,
    InvalidKeyEncoding, IOFault, NestingTooDeep, NotANumber, UnrecognizedTag
)
from .value import INT64_MAX, INT64_MIN, ByteString, Dictionary, Integer, List, Value, key_order

DIGITS = b'0123456789'


class Decoder:
    def __init__(self, source: BinaryIO, max_depth: Optional[int] = None):
        self.source = source
        self.max_depth = config.MAX_DEPTH if max_depth is None else max_depth
        self.current = b''
        self.offset = 0
        self._depth = 0

    def decode(self) -> Value:
        """
        Reads exactly one value from the source and returns it.
        Raises:
            BdecodeError
        """
        start = self.offset
        self._depth = 0
        value = self._decode(self._advance())
        logger.debug(f'Decoded {value.tag} from {self.offset - start} bytes')
        return value

    def __iter__(self) -> Iterator[Value]:
        """Decodes concatenated values until the source ends on a value boundary."""
        while True:
            c = self._read()
            if not c:
                return
            self.current = c
            self._depth = 0
            yield self._decode(c)

    def _read(self) -> bytes:
        try:
            c = self.source.read(1)
        except OSError as e:
            raise IOFault('Failed to read from source', self.offset) from e
        if c:
            self.offset += 1
        return c

    def _advance(self) -> bytes:
        c = self._read()
        if not c:
            raise EndOfInput('Unexpected end of input', self.offset)
        self.current = c
        return c

    def _decode(self, c: bytes) -> Value:
        if c == b'i':
            return self._decode_integer()
        elif c in DIGITS:
            return self._decode_string()
        elif c == b'l':
            return self._decode_list()
        elif c == b'd':
            return self._decode_dictionary()
        raise UnrecognizedTag(c, self.offset - 1)

    def _decode_integer(self) -> Integer:
        if self._advance() == b'e':
            raise EmptyNumber('Integer has no digits', self.offset)
        sign = 1
        if self.current == b'-':
            sign = -1
            self._advance()
        number, count = self._decode_number(sign)
        if count == 0 or self.current != b'e':
            raise NotANumber(f'Unexpected {self.current!r} in integer', self.offset - 1)
        return Integer(number)

    def _decode_number(self, sign: int):
        """Accumulates digits starting at current, stops on the first non-digit byte."""
        number = 0
        count = 0
        while self.current in DIGITS:
            number = number * 10 + (ord(self.current) - 48) * sign
            if not INT64_MIN <= number <= INT64_MAX:
                raise IntegerOverflow('Number does not fit in a signed 64-bit integer', self.offset)
            count += 1
            self._advance()
        return number, count

    def _decode_string(self) -> ByteString:
        size, _ = self._decode_number(1)
        if self.current != b':':
            raise NotANumber(f'Unexpected {self.current!r} in string length', self.offset - 1)
        return ByteString(self._read_exactly(size))

    def _read_exactly(self, size: int) -> bytes:
        chunks = []
        remaining = size
        while remaining:
            try:
                chunk = self.source.read(min(remaining, config.READ_CHUNK_SIZE))
            except OSError as e:
                raise IOFault('Failed to read from source', self.offset) from e
            if not chunk:
                raise EndOfInput(f'String payload truncated, {remaining} of {size} bytes missing', self.offset)
            self.offset += len(chunk)
            remaining -= len(chunk)
            chunks.append(chunk)
        return b''.join(chunks)

    def _enter(self):
        self._depth += 1
        if self._depth > self.max_depth:
            raise NestingTooDeep(self.max_depth, self.offset - 1)

    def _decode_list(self) -> List:
        self._enter()
        result = List()
        items = result.data
        while self._advance() != b'e':
            items.append(self._decode(self.current))
        self._depth -= 1
        return result

    def _decode_dictionary(self) -> Dictionary:
        self._enter()
        result = Dictionary()
        data = result.data
        last_key = None
        while self._advance() != b'e':
            key = self._decode_key()
            try:
                c = self._advance()
            except EndOfInput:
                raise DictionaryValueMissing(key, self.offset) from None
            if c == b'e':
                raise DictionaryValueMissing(key, self.offset - 1)
            if key in data:
                logger.warning(f'Duplicate dictionary key {key!r}, keeping the last value')
            elif last_key is not None and key_order(key) < key_order(last_key):
                logger.warning(f'Dictionary key {key!r} out of order after {last_key!r}')
            data[key] = self._decode(c)
            last_key = key
        self._depth -= 1
        return result

    def _decode_key(self) -> str:
        start = self.offset - 1
        key = self._decode(self.current)
        if not isinstance(key, ByteString):
            raise DictionaryKeyNotString(key, start)
        try:
            return key.decode()
        except UnicodeDecodeError:
            raise InvalidKeyEncoding(bytes(key), start) from None


def iter_decode(source: BinaryIO, max_depth: Optional[int] = None) -> Iterator[Value]:
    return iter(Decoder(source, max_depth))
