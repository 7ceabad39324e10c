import io
from rich.console import Console
from gimmefive.reveal.models import Phase, RoundSnapshot
from gimmefive.terminal.view import FINAL_STYLE, HINT, ROLLING_STYLE, SCREEN_HEIGHT, render_view, word_block

def render_text(snapshot):
    console = Console(file=io.StringIO(), width=100, color_system=None, legacy_windows=False)
    console.print(render_view(snapshot))
    return console.file.getvalue()

def test_word_is_upper_cased_with_hint():
    out = render_text(RoundSnapshot(word="crane", phase=Phase.ROLLING, step=3, round_number=1))
    assert "CRANE" in out
    assert HINT in out
    assert len(out.splitlines()) == SCREEN_HEIGHT

def test_placeholder_before_first_word():
    out = render_text(RoundSnapshot(word="", phase=Phase.ROLLING, step=-1))
    assert "-----" in out

def test_word_position_does_not_depend_on_word():
    a = render_text(RoundSnapshot(word="crane", phase=Phase.ROLLING, step=0)).splitlines()
    b = render_text(RoundSnapshot(word="zebra", phase=Phase.STOPPED, step=15)).splitlines()
    row_a = next(i for i, line in enumerate(a) if "CRANE" in line)
    row_b = next(i for i, line in enumerate(b) if "ZEBRA" in line)
    assert row_a == row_b
    assert a[row_a].index("CRANE") == b[row_b].index("ZEBRA")

def test_phase_changes_style():
    assert word_block("crane", Phase.ROLLING).style == ROLLING_STYLE
    assert word_block("crane", Phase.STOPPED).style == FINAL_STYLE
