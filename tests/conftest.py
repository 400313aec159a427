"""Shared fixtures: HTML shaped like the SNESLab opcode matrix and instruction pages."""

from __future__ import annotations

import pytest

INDEX_HTML = """\
<!DOCTYPE html>
<html>
<head><title>65c816 Opcode Matrix</title></head>
<body>
  <p><a href="/wiki/Main_Page">Main Page</a></p>
  <table class="wikitable">
    <tbody>
      <tr><th>x0</th><th>x1</th></tr>
      <tr>
        <td><a href="/wiki/BRK">BRK</a> <a href="/wiki/Stack">s</a></td>
        <td><a href="/wiki/ORA">ORA</a></td>
      </tr>
      <tr>
        <td><a href="/wiki/ORA">ORA</a></td>
        <td><span><a href="/wiki/Nested">nested</a></span></td>
      </tr>
    </tbody>
  </table>
</body>
</html>
"""


def instruction_page(rows: list[tuple[str, str, str, str]], header: bool = True) -> str:
    """Build an instruction page whose third ``tbody`` holds *rows*."""
    body = []
    if header:
        body.append(
            "<tr><th>Addressing Mode</th><th>Opcode</th><th>Length</th><th>Speed</th></tr>"
        )
    for mode, opcode, length, speed in rows:
        body.append(
            f"<tr><td>{mode}\n</td><td>{opcode}\n</td>"
            f"<td>{length}\n</td><td>{speed}\n</td></tr>"
        )
    return f"""\
<!DOCTYPE html>
<html>
<head><title>Instruction</title></head>
<body>
  <table class="wikitable">
    <tbody><tr><td>Summary</td></tr></tbody>
    <tbody><tr><td>Flags</td></tr></tbody>
    <tbody>
      {"".join(body)}
    </tbody>
  </table>
</body>
</html>
"""


ADC_HTML = instruction_page([("Immediate", "69", "2", "2 cycles")])

MVN_HTML = instruction_page([
    ("Block Move", "54", "3 bytes", "7 cycles per byte moved"),
])

LDA_HTML = instruction_page([
    ("Immediate<sup>[1]</sup>", "A9", "2/3 bytes", "2 cycles*"),
    ("Absolute", "AD", "3 bytes", "4 cycles*"),
    ("Direct Page", "A5", "2 bytes", "3 cycles*"),
    ("Absolute Long Indexed by X", "BF", "4 bytes", "5 cycles*"),
])


@pytest.fixture
def cache_dir(tmp_path, monkeypatch):
    """An empty cache directory wired into the settings singleton."""
    path = tmp_path / "ops"
    path.mkdir()
    monkeypatch.setattr("opmatrix.config.settings.cache_dir", path)
    monkeypatch.setattr("opmatrix.config.settings.rate_limit_delay", 0.0)
    return path


@pytest.fixture
def populated_cache(cache_dir):
    """Cache directory holding the ADC, LDA and MVN pages."""
    for name, html in (("ADC", ADC_HTML), ("LDA", LDA_HTML), ("MVN", MVN_HTML)):
        (cache_dir / f"{name}.html").write_text(html, encoding="utf-8")
    return cache_dir


@pytest.fixture
def index_html() -> str:
    return INDEX_HTML


@pytest.fixture
def make_page():
    """Factory building an instruction page from ``(mode, opcode, bytes, clocks)`` rows."""
    return instruction_page


@pytest.fixture
def adc_html() -> str:
    return ADC_HTML


@pytest.fixture
def lda_html() -> str:
    return LDA_HTML
