"""
Bencoding implementation written in python3. See https://www.bittorrent.org/beps/bep_0003.html.
bdecode/bencode are shortcuts for the Decoder/Encoder classes.
"""

import os
from io import BufferedIOBase, BytesIO, RawIOBase
from typing import Union

from loguru import logger

from .decoder import Decoder, iter_decode
from .encoder import Encoder
from .errors import (
    BdecodeError, BencodeError, DictionaryKeyNotString, DictionaryValueMissing, EmptyNumber, EndOfInput,
    IntegerOverflow, InvalidKeyEncoding, IOFault, NestingTooDeep, NotANumber, UnrecognizedTag, UnsupportedType
)
from .value import ByteString, Dictionary, Integer, List, Value, to_value

logger.disable(__name__)


def bdecode(_input: Union[bytes, bytearray, BufferedIOBase, RawIOBase, str, os.PathLike]) -> Value:
    """
    Args:
        _input: A bytes object, or a binary reader, or a file path
    Raises:
        BdecodeError
    """
    if isinstance(_input, (bytes, bytearray)):
        return Decoder(BytesIO(_input)).decode()
    if isinstance(_input, (str, os.PathLike)):
        with open(_input, 'rb') as _file:
            return Decoder(_file).decode()
    return Decoder(_input).decode()


def bencode(obj) -> bytes:
    fp = []
    Encoder(fp.append).encode(obj)
    return b''.join(fp)


__all__ = [
    'bdecode', 'bencode', 'iter_decode', 'Decoder', 'Encoder', 'to_value',
    'Value', 'Integer', 'ByteString', 'List', 'Dictionary',
    'BdecodeError', 'BencodeError', 'IOFault', 'EndOfInput', 'NotANumber', 'EmptyNumber', 'IntegerOverflow',
    'DictionaryKeyNotString', 'DictionaryValueMissing', 'InvalidKeyEncoding', 'UnrecognizedTag',
    'NestingTooDeep', 'UnsupportedType',
]
