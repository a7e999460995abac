from typing import Dict, Iterable, List, NamedTuple


class ClassIdEntry(NamedTuple):
    declared_type: str
    identifier: str


class Accumulator:
    """Entries collected from one UI file, one ordered list per element kind."""

    def __init__(self, tags: Iterable[str]):
        self._entries: Dict[str, list] = dict((tag, []) for tag in tags)

    def __getitem__(self, tag: str) -> list:
        return self._entries[tag]

    def __contains__(self, tag: str) -> bool:
        return tag in self._entries

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self._entries)

    @property
    def class_ids(self) -> List[ClassIdEntry]:
        return self._entries.get('object', [])

    @property
    def handlers(self) -> List[str]:
        return self._entries.get('signal', [])

    def is_empty(self) -> bool:
        return not any(self._entries.values())


def base_name(file_name: str) -> str:
    dot = file_name.rfind('.')
    if dot >= 0:
        file_name = file_name[:dot]
    return _ascii_lower(file_name.replace('-', '_'))


def struct_name(base: str) -> str:
    parts = []
    for part in base.split('_'):
        if part:
            if 'a' <= part[0] <= 'z':
                part = part[0].upper() + part[1:]
            parts.append(part)
    return ''.join(parts) + 'Binding'


def output_file_name(base: str) -> str:
    return base + '_viewbinding.h'


def guard_token(application_id: str, base: str) -> str:
    return '{}_{}_VIEW_BINDING_H_'.format(_ascii_upper(application_id), base)


def _ascii_lower(s: str) -> str:
    return ''.join(chr(ord(c) + 32) if 'A' <= c <= 'Z' else c for c in s)


def _ascii_upper(s: str) -> str:
    return ''.join(chr(ord(c) - 32) if 'a' <= c <= 'z' else c for c in s)
