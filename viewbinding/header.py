from typing import Mapping, Optional

import jinja2

from .kinds import ELEMENT_KINDS, ElementKind
from .model import Accumulator, guard_token

_environment: Optional[jinja2.Environment] = None


def environment() -> jinja2.Environment:
    global _environment
    if _environment is None:
        _environment = jinja2.Environment(
            loader=jinja2.PackageLoader('viewbinding'),
            autoescape=jinja2.select_autoescape(['html']),
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
    return _environment


def render(application_id: str, base_name: str, accumulator: Accumulator,
           kinds: Mapping[str, ElementKind] = ELEMENT_KINDS) -> str:
    """Render the complete header for one UI file.

    Sections appear in the registration order of `kinds`; a kind without
    entries contributes nothing. The same input always renders to the same
    text.
    """
    env = environment()
    sections = [kind.emit_code(env, base_name, accumulator[tag])
                for tag, kind in kinds.items() if tag in accumulator]
    return env.get_template('viewbinding.h').render(
        guard=guard_token(application_id, base_name),
        sections=[s for s in sections if s],
    )
