# main.py
from tangent_router.app.build import build

DEMO = {
    "name": "demo",
    "run_id": "demo-1",
    "obstacles": [
        [(1, 0), (2, 0), (2, 15), (1, 15)],
        [(0, 17), (20, 17), (20, 19), (0, 19)],
        [(5, 0), (60, 0), (60, 14), (5, 14)],
        [(24, 16), (60, 16), (60, 24), (24, 24)],
    ],
    "start": (0, 0),
    "end": (20, 20),
}


def run(cfg=DEMO):
    planner = build(cfg)
    result = planner.plan(cfg["start"], cfg["end"])
    for p in result.path:
        print(f"{p.x:g},{p.y:g}")
    return result


if __name__ == "__main__":
    run()
