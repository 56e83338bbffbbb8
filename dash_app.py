"""Dash front-end for the linear function explorer."""

from __future__ import annotations

import argparse
import logging

from linear_explorer.controller import InteractionController
from linear_explorer.dash_views import create_app
from linear_explorer.event_log import EventLog, session_log_path
from linear_explorer.logging_config import setup_logging


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Run the linear function explorer (Dash).")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8050)
    parser.add_argument("--debug", action="store_true", help="Enable Dash debug mode and DEBUG logging.")
    parser.add_argument(
        "--log-events",
        action="store_true",
        help="Also append interaction events to a JSONL file under the data directory.",
    )
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    events = EventLog()
    if args.log_events:
        events.path = session_log_path(events.session_id)
    controller = InteractionController.start(event_log=events)
    app = create_app(controller)
    # one controller serves the page; keep callbacks on a single thread
    app.run(host=args.host, port=args.port, debug=args.debug, threaded=False)


if __name__ == "__main__":
    main()
