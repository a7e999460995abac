import xml.etree.ElementTree as xml
from typing import Mapping

from .kinds import ELEMENT_KINDS, ElementKind
from .model import Accumulator

_CHUNK_SIZE = 64 * 1024


class Scanner:
    """Single forward pass over one UI document.

    Only start tags are observed. Each start tag registered in `kinds` hands
    its attributes, in document order, to the kind's collector together with
    that kind's entry list in the accumulator.
    """

    def __init__(self, kinds: Mapping[str, ElementKind] = ELEMENT_KINDS):
        self._kinds = kinds

    def scan(self, data: bytes) -> Accumulator:
        accumulator = Accumulator(self._kinds.keys())
        parser = xml.XMLPullParser(events=('start',))
        for offset in range(0, len(data), _CHUNK_SIZE):
            parser.feed(data[offset:offset + _CHUNK_SIZE])
            self._dispatch(parser, accumulator)
        parser.close()
        self._dispatch(parser, accumulator)
        return accumulator

    def _dispatch(self, parser: xml.XMLPullParser, accumulator: Accumulator):
        for _, elem in parser.read_events():
            kind = self._kinds.get(elem.tag)
            if kind is not None:
                kind.collect_attributes(list(elem.attrib.items()), accumulator[kind.tag])


def load(path: str, kinds: Mapping[str, ElementKind] = ELEMENT_KINDS) -> Accumulator:
    with open(path, 'rb') as f:
        data = f.read()
    return Scanner(kinds).scan(data)
