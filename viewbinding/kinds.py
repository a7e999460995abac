from collections import OrderedDict
from types import MappingProxyType
from typing import List, Mapping, Tuple

import jinja2

from .model import ClassIdEntry, struct_name

Attributes = List[Tuple[str, str]]


class ElementKind:
    """A markup element that contributes entries to the generated header.

    Entries are collected from the attributes of every start tag named `tag`
    and turned into one section of the header by `emit_code`.
    """

    tag: str = None
    template: str = None

    def collect_attributes(self, attributes: Attributes, entries: list):
        raise NotImplementedError()

    def emit_code(self, env: jinja2.Environment, base_name: str, entries: list) -> str:
        if not entries:
            return ''
        return env.get_template(self.template).render(**self.template_args(base_name, entries))

    def template_args(self, base_name: str, entries: list) -> dict:
        raise NotImplementedError()

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.tag)


class ObjectKind(ElementKind):
    tag = 'object'
    template = 'object.h'

    def collect_attributes(self, attributes: Attributes, entries: List[ClassIdEntry]):
        declared_type = None
        identifier = None
        for key, value in attributes:
            if key == 'class' and declared_type is None:
                declared_type = value
            elif key == 'id' and identifier is None:
                identifier = value
        if declared_type and identifier:
            entries.append(ClassIdEntry(declared_type, identifier))

    def template_args(self, base_name: str, entries: List[ClassIdEntry]) -> dict:
        return {
            'base_name': base_name,
            'struct_name': struct_name(base_name),
            'entries': entries,
        }


class SignalKind(ElementKind):
    tag = 'signal'
    template = 'signal.h'

    def collect_attributes(self, attributes: Attributes, entries: List[str]):
        # first handler wins, the rest of the tag is not looked at
        for key, value in attributes:
            if key == 'handler':
                entries.append(value)
                return

    def template_args(self, base_name: str, entries: List[str]) -> dict:
        return {
            'base_name': base_name,
            'handlers': entries,
        }


ELEMENT_KINDS: Mapping[str, ElementKind] = MappingProxyType(OrderedDict(
    (kind.tag, kind) for kind in (ObjectKind(), SignalKind())
))
