"""
打印 bencode 文件的内容，可以用来查看种子文件或者 fastresume
用法: bencode-dump FILE [--all] [--check] [--hex]
"""

import argparse
import pprint
import sys
from io import BytesIO

from loguru import logger

from . import config
from .decoder import Decoder
from .encoder import Encoder
from .errors import BdecodeError
from .value import ByteString, Dictionary, List, Value


class HexPrinter:
    def __init__(self, data: bytes):
        self.data = data

    def __repr__(self):
        return f"hex({len(self.data)} bytes):'{self.data.hex()}'"


def printable(value: Value, force_hex: bool = False):
    """Plain python data for pprint, printable ascii strings are shown as text and everything else as hex"""
    if isinstance(value, ByteString):
        if not force_hex and all(0x20 <= b <= 0x7e for b in value):
            return value.decode()
        return HexPrinter(bytes(value))
    if isinstance(value, List):
        return [printable(item, force_hex) for item in value]
    if isinstance(value, Dictionary):
        return {key: printable(item, force_hex) for key, item in value.items()}
    return value.payload


def is_canonical(raw: bytes, values) -> bool:
    fp = BytesIO()
    encoder = Encoder(fp)
    for value in values:
        encoder.encode(value)
    return fp.getvalue() == raw


def setup_logger():
    logger.enable('bencodec')
    if config.LOG_PATH:
        logger.add(level=config.LOG_LEVEL, sink=config.LOG_PATH, rotation=config.LOG_ROTATION)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='bencode-dump', description='Dumps a bencoded file')
    parser.add_argument('file')
    parser.add_argument('--all', action='store_true', help='decode every concatenated value in the file')
    parser.add_argument('--check', action='store_true', help='exit with status 1 if the file is not canonical')
    parser.add_argument('--hex', action='store_true', help='show every byte string as hex')
    args = parser.parse_args(argv)

    setup_logger()
    with open(args.file, 'rb') as f:
        raw = f.read()

    decoder = Decoder(BytesIO(raw))
    try:
        values = list(decoder) if args.all else [decoder.decode()]
    except BdecodeError as e:
        logger.error(f'{args.file}: {e}')
        return 2

    printer = pprint.PrettyPrinter(indent=2)
    for value in values:
        printer.pprint(printable(value, args.hex))
    if decoder.offset < len(raw):
        logger.warning(f'{args.file}: {len(raw) - decoder.offset} trailing bytes not decoded')

    if args.check:
        if is_canonical(raw[:decoder.offset], values):
            logger.info(f'{args.file}: canonical')
        else:
            logger.warning(f'{args.file}: not canonical')
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
