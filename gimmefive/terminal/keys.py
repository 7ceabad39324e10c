import re
from gimmefive.reveal.models import NewRoundRequested, QuitRequested

ESC = b"\x1b"

# Wheel reporting is turned on with 1000 (X10) and 1006 (SGR coordinates)
MOUSE_ON = "\x1b[?1000h\x1b[?1006h"
MOUSE_OFF = "\x1b[?1006l\x1b[?1000l"

WHEEL_UP = 64
WHEEL_DOWN = 65

SGR_MOUSE = re.compile(rb"\x1b\[<(\d+);(\d+);(\d+)([Mm])")
X10_MOUSE = re.compile(rb"\x1b\[M(.)(.)(.)", re.DOTALL)
OTHER_CSI = re.compile(rb"\x1b\[[0-9;?]*[A-Za-z~]")

def _wheel_event(button: int):
    if button == WHEEL_UP:
        return NewRoundRequested(source="scroll_up")
    if button == WHEEL_DOWN:
        return NewRoundRequested(source="scroll_down")
    return None

def decode(data: bytes) -> list:
    """
    Turns a chunk of raw terminal input into controller events.

    Enter confirms, the mouse wheel scrolls, q / Esc / Ctrl-C quit. Anything
    else, arrow keys and clicks included, is dropped.
    """
    events = []
    pos = 0
    while pos < len(data):
        if data.startswith(ESC, pos):
            m = SGR_MOUSE.match(data, pos)
            if m:
                if m.group(4) == b"M":
                    event = _wheel_event(int(m.group(1)))
                    if event:
                        events.append(event)
                pos = m.end()
                continue
            m = X10_MOUSE.match(data, pos)
            if m:
                event = _wheel_event(m.group(1)[0] - 32)
                if event:
                    events.append(event)
                pos = m.end()
                continue
            m = OTHER_CSI.match(data, pos)
            if m:
                pos = m.end()
                continue
            if pos + 1 == len(data) or data.startswith(ESC, pos + 1):
                # A lone Esc
                events.append(QuitRequested())
            pos += 1
            continue

        byte = data[pos]
        if byte in (10, 13):
            events.append(NewRoundRequested(source="confirm"))
        elif byte in (ord("q"), ord("Q"), 3):
            events.append(QuitRequested())
        pos += 1
    return events
