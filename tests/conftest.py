from pathlib import Path

import pytest

SAMPLE_INI = """\
; stray line before any section
[Renderer]
resolution_factor = 2
use_hw_renderer = True
use_shader_jit=False
frame_limit = 100
bg_red = 0.25
[Audio]
output_engine = auto
volume = 1.0
enable_dsp_lle = true
[Layout]
[Core]
use_cpu_jit = True
"""


@pytest.fixture
def sample_ini(tmp_path: Path) -> Path:
    path = tmp_path / "config" / "config.ini"
    path.parent.mkdir()
    path.write_text(SAMPLE_INI, encoding="utf-8")
    return path
