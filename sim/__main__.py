"""Run the node simulator against a collector."""

import asyncio
import os
from pathlib import Path

from dotenv import load_dotenv

from eventsink.logging_config import setup_logging

from .sim import Sim


async def run() -> None:
    api_url = os.getenv("EVENTSINK_URL", "http://localhost:8000")
    user = os.getenv("EVENTSINK_USER", "")
    password = os.getenv("EVENTSINK_PASSWORD", "")
    auth = (user, password) if user and password else None

    sim = Sim(api_url=api_url, node=os.getenv("SIM_NODE", "10.44.131.21"), auth=auth)
    await sim.start()
    try:
        await sim.wait()
    finally:
        await sim.stop()


def main() -> None:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    setup_logging()
    asyncio.run(run())


if __name__ == "__main__":
    main()
