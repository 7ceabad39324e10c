import asyncio
import logging
import os
import signal
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Optional
from rich.console import Console
from rich.live import Live
from gimmefive.reveal.models import QuitRequested, RoundSnapshot
from gimmefive.runtime.session import RevealSession
from gimmefive.terminal.keys import MOUSE_OFF, MOUSE_ON, decode
from gimmefive.terminal.view import render_view

logger = logging.getLogger(__name__)

@contextmanager
def raw_input(fd: int, console: Console):
    """
    Puts the terminal in cbreak mode with wheel reporting for the duration.
    """
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        console.file.write(MOUSE_ON)
        console.file.flush()
        yield
    finally:
        console.file.write(MOUSE_OFF)
        console.file.flush()
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)

class TerminalApp:
    """
    Full-screen front end: reads stdin, redraws on every state change.
    """

    def __init__(self, session: RevealSession, console: Optional[Console] = None):
        self.session = session
        self.console = console or Console()

    def _on_readable(self, fd: int):
        try:
            data = os.read(fd, 1024)
        except OSError as e:
            logger.error(f"Reading terminal input failed: {e}")
            self.session.post(QuitRequested())
            return
        if not data:
            # stdin closed
            self.session.post(QuitRequested())
            return
        for event in decode(data):
            self.session.post(event)

    async def run(self) -> RoundSnapshot:
        loop = asyncio.get_running_loop()
        fd = sys.stdin.fileno()
        first = self.session.controller.snapshot()

        with Live(render_view(first), console=self.console, screen=True, auto_refresh=False) as live:
            self.session.on_change = lambda snap: live.update(render_view(snap), refresh=True)
            with raw_input(fd, self.console):
                loop.add_reader(fd, self._on_readable, fd)
                loop.add_signal_handler(signal.SIGINT, self.session.post, QuitRequested())
                try:
                    return await self.session.run()
                finally:
                    loop.remove_signal_handler(signal.SIGINT)
                    loop.remove_reader(fd)
