import os
import sys
import tempfile
import xml.etree.ElementTree as xml
from typing import List, Tuple

from . import header, source
from .model import base_name, output_file_name


def _warning(file_name: str, msg: str):
    print('{}: {}'.format(file_name, msg), file=sys.stderr)


def ui_files(directory: str) -> List[str]:
    return sorted(f for f in os.listdir(directory)
                  if f.endswith('.ui') and os.path.isfile(os.path.join(directory, f)))


def write_file(path: str, text: str):
    """Replace `path` with `text` in one step; a failed write leaves no partial file."""
    umask = os.umask(0)
    os.umask(umask)
    fd, tmp_path = tempfile.mkstemp(prefix='.', suffix='.tmp', dir=os.path.dirname(path) or '.')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
        os.chmod(tmp_path, 0o666 & ~umask)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise


def generate_one(file_name: str, directory: str, output_directory: str, application_id: str) -> bool:
    input_path = os.path.join(directory, file_name)
    try:
        accumulator = source.load(input_path)
    except OSError as e:
        _warning(input_path, 'Error reading file: {}'.format(e.strerror or e))
        return False
    except xml.ParseError as e:
        _warning(input_path, 'Error parsing XML: {}'.format(e))
        return False

    base = base_name(file_name)
    text = header.render(application_id, base, accumulator)

    output_path = os.path.join(output_directory, output_file_name(base))
    try:
        write_file(output_path, text)
    except OSError as e:
        _warning(output_path, 'Error writing file: {}'.format(e.strerror or e))
        return False
    return True


def generate(directory: str, output_directory: str, application_id: str) -> Tuple[int, int]:
    succeeded = 0
    failed = 0
    for file_name in ui_files(directory):
        if generate_one(file_name, directory, output_directory, application_id):
            succeeded += 1
        else:
            failed += 1
    return succeeded, failed
