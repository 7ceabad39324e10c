import asyncio
import random
from gimmefive.draw.pool import IndexPool
from gimmefive.reveal.controller import RoundController
from gimmefive.reveal.models import NewRoundRequested, Phase, QuitRequested
from gimmefive.reveal.rules import ROUND_SIZE
from gimmefive.runtime.scheduler import AsyncioScheduler
from gimmefive.runtime.session import RevealSession
from gimmefive.words.catalog import WordCatalog

def make_session(time_scale=0.001):
    catalog = WordCatalog.from_lines([f"word{c}" for c in "abcdefghijklmnopqrst"])
    queue = asyncio.Queue()
    pool = IndexPool(len(catalog), rng=random.Random(9))
    controller = RoundController(catalog, pool, AsyncioScheduler(queue, time_scale=time_scale))
    snapshots = []
    return RevealSession(controller, queue, on_change=snapshots.append), snapshots

async def test_quit_ends_session_immediately():
    session, snapshots = make_session(time_scale=1.0)
    session.post(QuitRequested())
    # StartRound is queued behind the quit
    final = await asyncio.wait_for(session.run(), timeout=2)
    assert session.controller.running is False
    assert final.round_number == 0

async def test_round_plays_through_queue_and_stops():
    session, snapshots = make_session()
    task = asyncio.create_task(session.run())

    while not (snapshots and snapshots[-1].phase == Phase.STOPPED):
        await asyncio.sleep(0.005)

    steps = [s.step for s in snapshots]
    assert steps == list(range(ROUND_SIZE)) + [ROUND_SIZE - 1]
    assert snapshots[-1].word == session.controller.final_word()

    session.post(QuitRequested())
    await asyncio.wait_for(task, timeout=2)

async def test_new_round_request_while_rolling_has_no_effect():
    session, snapshots = make_session(time_scale=1.0)
    task = asyncio.create_task(session.run())
    while not snapshots:
        await asyncio.sleep(0.001)

    indices = list(session.controller.round_indices)
    session.post(NewRoundRequested(source="scroll_up"))
    await asyncio.sleep(0.01)
    assert session.controller.round_indices == indices
    assert session.controller.step == 0

    session.post(QuitRequested())
    await asyncio.wait_for(task, timeout=2)
