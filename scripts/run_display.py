"""Run the TfL status display with an optional live preview server."""

from __future__ import annotations

import argparse
from http.server import BaseHTTPRequestHandler, HTTPServer
import io
import json
import logging
import threading
from typing import Any
from urllib.parse import parse_qs, urlsplit

from tfl_status.config import load_config, modes_from_params, show_names_from_params
from tfl_status.data.poller import StatusPoller
from tfl_status.data.tfl_client import TfLClient
from tfl_status.logging_setup import configure_logging, log_usage_instructions
from tfl_status.rendering import FrameSink

logger = logging.getLogger("tfl_status.preview")


def _make_handler(sink: FrameSink, poller: StatusPoller) -> type[BaseHTTPRequestHandler]:
    class PreviewHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            path = urlsplit(self.path).path

            if path == "/healthz":
                self._send(200, "text/plain; charset=utf-8", b"ok")
                return

            if path == "/frame.png":
                image = sink.image
                if image is None:
                    self._send(404, "text/plain; charset=utf-8", b"no frame yet")
                    return
                buffer = io.BytesIO()
                image.save(buffer, format="PNG")
                self._send(200, "image/png", buffer.getvalue())
                return

            if path == "/status.json":
                latest = poller.get_latest()
                frame = sink.frame
                body = {
                    "entries": [
                        {
                            "message": entry.message,
                            "background_color": entry.background_color,
                            "striped": entry.striped,
                        }
                        for entry in (frame.entries if frame else ())
                    ],
                    "total_blocks": frame.total_blocks if frame else 0,
                    "last_fetch_ok": latest.ok if latest else None,
                    "last_error": latest.error if latest else None,
                    "max_age": latest.max_age if latest else None,
                }
                self._send(200, "application/json", json.dumps(body).encode("utf-8"))
                return

            if path == "/":
                self._send(200, "text/html; charset=utf-8", sink.page().encode("utf-8"))
                return

            self._send(404, "text/plain; charset=utf-8", b"not found")

        def _send(self, status: int, content_type: str, body: bytes) -> None:
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args: Any) -> None:
            logger.debug(format, *args)

    return PreviewHandler


def _run_server(host: str, port: int, sink: FrameSink, poller: StatusPoller) -> None:
    server = HTTPServer((host, port), _make_handler(sink, poller))
    logger.info("Preview server listening on http://%s:%d/", host, port)
    server.serve_forever()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default="config/config.yaml", help="Path to the YAML config")
    parser.add_argument(
        "--query",
        default="",
        help="Page-style query string overriding the configured modes/names, e.g. 'mode=tube&names=true'",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Preview server bind address")
    parser.add_argument("--port", type=int, default=8080, help="Preview server port")
    parser.add_argument(
        "--no-server",
        action="store_true",
        help="Disable preview web server",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.log)
    log_usage_instructions(config.log.dev_mode)

    params = parse_qs(args.query, keep_blank_values=True)
    modes = modes_from_params(params, default=config.tfl.modes)
    show_names = show_names_from_params(params) if "names" in params else config.tfl.show_names

    sink = FrameSink(
        width=config.display.width,
        height=config.display.height,
        output_path=config.display.output_path,
    )
    poller = StatusPoller(
        client=TfLClient(config.tfl.app_key),
        modes=modes,
        show_names=show_names,
        render=sink,
        fallback_interval_seconds=config.tfl.fallback_interval_seconds,
    )

    if not args.no_server:
        server_thread = threading.Thread(
            target=_run_server, args=(args.host, args.port, sink, poller), daemon=True
        )
        server_thread.start()

    logger.info("Polling TfL status for %s (names=%s)", modes, show_names)
    poller.start()
    stop_event = threading.Event()
    try:
        stop_event.wait()
    except KeyboardInterrupt:
        poller.stop()
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
