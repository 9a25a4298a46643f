from typing import Dict


def init_metrics() -> Dict[str, int]:
    """Deterministic generation counters; equal for equal (config, seed)."""
    return {
        "rooms": 0,
        "rooms_target": 0,
        "placement_attempts": 0,
        "placements_rejected": 0,
        "connections": 0,
        "doors": 0,
        "corridor_segments": 0,
        "unreachable_rooms": 0,
    }


def init_timings() -> Dict[str, int | dict]:
    """Wall-clock phase timings; kept apart from metrics since they vary per run."""
    return {"runtime_ms": 0, "phase_ms": {}}
