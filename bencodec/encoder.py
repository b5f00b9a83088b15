from typing import Any, BinaryIO, Callable, Union

from loguru import logger

from .errors import IOFault, UnsupportedType
from .value import ByteString, Dictionary, Integer, List, Value, key_order, to_value


class Encoder:
    """
    Writes canonical bencode to a sink, which is a binary file object or any callable taking bytes.
    Plain python data is converted with to_value first.
    """

    def __init__(self, sink: Union[BinaryIO, Callable[[bytes], Any]]):
        self.sink = sink
        self._write = getattr(sink, 'write', sink)
        self.written = 0

    def encode(self, value: Value):
        start = self.written
        value = to_value(value)
        self._encode(value)
        logger.debug(f'Encoded {value.tag} to {self.written - start} bytes')

    def write(self, data: bytes):
        try:
            self._write(data)
        except OSError as e:
            raise IOFault('Failed to write to sink') from e
        self.written += len(data)

    def _encode(self, value: Value):
        write = self.write
        if isinstance(value, Integer):
            write(b'i')
            write(str(int(value)).encode())
            write(b'e')
        elif isinstance(value, ByteString):
            self._encode_bytes(value)
        elif isinstance(value, List):
            write(b'l')
            for item in value.data:
                self._encode(item)
            write(b'e')
        elif isinstance(value, Dictionary):
            for key in value.data:
                if not isinstance(key, str):
                    raise UnsupportedType(key)
            write(b'd')
            for raw, item in sorted((key_order(k), v) for k, v in value.data.items()):
                self._encode_bytes(raw)
                self._encode(item)
            write(b'e')
        else:
            raise UnsupportedType(value)

    def _encode_bytes(self, data: bytes):
        self.write(str(len(data)).encode())
        self.write(b':')
        self.write(bytes(data))
