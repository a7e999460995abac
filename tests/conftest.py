import sys
from pathlib import Path
from typing import Callable

import pytest

PROJECT_DIR = Path(__file__).resolve().parent.parent
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

WINDOW_UI = '''<?xml version="1.0" encoding="UTF-8"?>
<interface>
  <template class="DemoWindow" parent="GtkApplicationWindow">
    <child>
      <object class="GtkButton" id="submit_btn">
        <property name="label">Submit</property>
        <signal name="clicked" handler="on_submit_clicked"/>
      </object>
    </child>
  </template>
</interface>
'''


@pytest.fixture
def ui_dir(tmp_path: Path) -> Path:
    path = tmp_path / 'ui'
    path.mkdir()
    return path


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    path = tmp_path / 'out'
    path.mkdir()
    return path


@pytest.fixture
def write_ui(ui_dir: Path) -> Callable[[str, str], Path]:
    def _write_ui(name: str, content: str) -> Path:
        path = ui_dir / name
        path.write_text(content, encoding='utf-8')
        return path

    return _write_ui
