from rich.align import Align
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.style import Style
from rich.text import Text
from gimmefive.reveal.models import Phase, RoundSnapshot

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 12
PLACEHOLDER = "-----"
HINT = "Enter or scroll → new round   ·   q / Esc → quit"

ROLLING_STYLE = Style(bold=True, color="#E8E8E8", bgcolor="#1a1a2e")
FINAL_STYLE = Style(bold=True, color="#00FF87", bgcolor="#0D1B2A")
HINT_STYLE = Style(color="#6B7280")

def word_block(word: str, phase: Phase) -> RenderableType:
    style = ROLLING_STYLE if phase == Phase.ROLLING else FINAL_STYLE
    text = Text((word or PLACEHOLDER).upper(), style=style)
    return Padding(text, (0, 2), style=style, expand=False)

def render_view(snapshot: RoundSnapshot) -> RenderableType:
    """
    Lays out the current word and the control hint in a fixed-size area.

    The word is always five characters wide, so its position never moves
    while the reveal is running.
    """
    body = Group(
        Text(""),
        Align.center(word_block(snapshot.word, snapshot.phase)),
        Text(""),
        Text(""),
        Align.center(Text(HINT, style=HINT_STYLE)),
    )
    return Align.center(body, vertical="middle", width=SCREEN_WIDTH, height=SCREEN_HEIGHT)
