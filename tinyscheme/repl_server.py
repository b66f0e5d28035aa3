from __future__ import annotations

"""
Simple TCP REPL server for tinyscheme.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(begin ...)"}
- Response: {"ok": true, "result": <printed value>}
  or {"ok": false, "error": <message>, "type": <error class name>}

A single Interpreter is kept alive so that definitions persist across requests.
The interpreter is not thread-safe, so evaluations are serialized with a lock.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from tinyscheme.config import configure_logging, get_repl_address
from tinyscheme.errors import SchemeError
from tinyscheme.interpreter import Interpreter

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None, prelude="auto"):
        default_host, default_port = get_repl_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        self.interp = Interpreter(prelude=prelude)
        self._lock = threading.Lock()

    def handle_request(self, req: dict) -> dict:
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}", "type": "ProtocolError"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "code must be a string", "type": "ProtocolError"}
        try:
            with self._lock:
                result = self.interp.run(code)
        except SchemeError as ex:
            logger.info("evaluation failed: %s", ex)
            return {"ok": False, "error": str(ex), "type": type(ex).__name__}
        except Exception as ex:
            # Keep the client connection alive on host failures
            logger.exception("unexpected failure evaluating request")
            return {"ok": False, "error": str(ex), "type": type(ex).__name__}
        return {"ok": True, "result": result}

    def handle_line(self, line: bytes) -> bytes:
        try:
            req = json.loads(line.decode("utf-8"))
            if not isinstance(req, dict):
                raise ValueError("request must be a JSON object")
        except ValueError as ex:
            resp = {"ok": False, "error": f"Invalid request: {ex}", "type": "ProtocolError"}
        else:
            resp = self.handle_request(req)
        return (json.dumps(resp) + "\n").encode("utf-8")

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("tinyscheme REPL listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("client connected from %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    conn.sendall(self.handle_line(line))
        logger.info("client %s:%d disconnected", *addr)


if __name__ == "__main__":
    configure_logging()
    ReplServer().serve_forever()
