ROUND_SIZE = 16

# Roll delays in ms: accelerate, hold at the minimum, then slow to a stop.
REVEAL_DELAYS_MS = (1000, 900, 800, 700, 600, 500, 400, 400, 400, 450, 550, 680, 800, 1000, 1500, 2000)

def is_past_final_step(step: int) -> bool:
    return step >= ROUND_SIZE

def total_reveal_ms() -> int:
    return sum(REVEAL_DELAYS_MS)
