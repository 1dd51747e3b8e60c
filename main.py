"""
Project intake entry point.

Usage:
    Interactive console:  python main.py console
    Scripted scenario:    python main.py scenario salle_de_bain
"""

import logging
import sys

from intake_engine.config import settings

logger = logging.getLogger(__name__)


def _run_console_mode() -> None:
    from console_demo import ConsoleSession

    ConsoleSession().run()


def _run_scenario_mode(name: str) -> None:
    from console_demo import ConsoleSession

    ConsoleSession().run_scenario(name)


if __name__ == "__main__":
    logger.info("Starting %s project intake (model %s)",
                settings.marketplace.name, settings.generation.llm_model)
    if len(sys.argv) > 2 and sys.argv[1] == "scenario":
        _run_scenario_mode(sys.argv[2])
    else:
        _run_console_mode()
