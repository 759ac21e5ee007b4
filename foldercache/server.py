"""TCP server exposing a folder tree through CREATE, INSERT, SELECT and PRINT."""

from __future__ import annotations

import re
import socketserver
import sys
from typing import Callable

from foldercache.tree import MAX_KEY, Tree

HOST = "127.0.0.1"
PORT = "12000"
READ_SIZE = 255
BACKLOG = 20

BANNER = (
    "\n\nConnected to CACHE Database \n\n"
    "   ** USE CORRECT COMMANDS TO INTERACT WITH THE CACHE  **\n"
    " \t ---CREATE /path/ \n"
    "  \t ---INSERT /path/ key = value\n"
    "  \t ---SELECT /path/ key \n"
    "  \t ---PRINT (to print tree)\n\n"
)

_SEPARATORS = re.compile(r"[ \n\r]+")


class CommandError(Exception):
    """A command was rejected; the message is the text sent to the client."""


def parse_command(line: str) -> tuple[str, str, str]:
    """Split a request into command, folder and argument (missing parts are empty)."""
    tokens = [token for token in _SEPARATORS.split(line) if token]
    tokens += [""] * 3
    command, folder, args = tokens[:3]
    return command, folder, args


class CacheSession:
    """Runs commands against one tree and produces the replies."""

    def __init__(self, tree: Tree) -> None:
        self.tree = tree
        self._handlers: dict[str, Callable[[str, str], str]] = {
            "CREATE": self.create,
            "INSERT": self.insert,
            "SELECT": self.select,
            "PRINT": lambda folder, args: self.print_tree(),
        }

    def _is_folder(self, path: str) -> bool:
        return bool(path) and self.tree.find_node(path) is not None

    def create(self, folder: str, args: str) -> str:
        """Create a folder; no argument may follow the path."""
        if args and not args[0].isspace():
            raise CommandError(" ---> 'Incorrect use of CREATE Command.'\n\n")
        if not folder:
            raise CommandError("Error: Folder path is required.\n\n")
        if self._is_folder(folder):
            raise CommandError("Error:The Folder is Already exist.\n\n")
        if args:
            raise CommandError("")
        self.tree.add_node(folder)
        return f"The Folder {folder} created !.\n\n"

    def insert(self, folder: str, args: str) -> str:
        """Store a ``key=value`` pair in an existing folder."""
        if not folder or not args:
            raise CommandError("  ---> 'Incorrect use of INSERT Command.'\n\n")
        if not self._is_folder(folder):
            raise CommandError("Error: Folder does not exist.\n\n")
        key, sep, value = args.partition("=")
        if not sep:
            raise CommandError("Error: Argument must be in key=value format.\n\n")
        key = key[:MAX_KEY]
        if not key or not value:
            raise CommandError("Error: Both key and value must be provided.\n\n")
        if self.tree.lookup(folder, key) is not None:
            raise CommandError("Error: The Key provided already EXISTS!.\n\n")
        node = self.tree.find_node(folder)
        self.tree.add_leaf(node, key, value)
        return f"Key-Value pair ({key}={value}) inserted into {folder}.\n\n"

    def select(self, folder: str, key: str) -> str:
        """Return the value stored under ``key`` in ``folder``."""
        if not folder or not key:
            raise CommandError("  ---> 'Incorrect use of SELECT Command.'\n\n")
        if not self._is_folder(folder):
            raise CommandError("Error: Folder does not exist.\n\n")
        leaf = self.tree.find_leaf(folder, key)
        if leaf is None:
            raise CommandError(
                f"Error: Key '{key}' not found in folder '{folder}'.\n\n"
            )
        return f"Value of key '{key}' in folder '{folder}': {leaf.value}\n\n"

    def print_tree(self) -> str:
        """Return the whole tree framed by header and footer lines."""
        return (
            "\n--- Database Tree Structure ---\n"
            + self.tree.render()
            + "\n--- End of Tree ---\n"
        )

    def execute(self, line: str) -> str:
        """Run one request line; raise CommandError if it fails."""
        command, folder, args = parse_command(line)
        handler = self._handlers.get(command)
        if handler is None:
            raise CommandError("Error: Unknown command.\n\n")
        return handler(folder, args)


class CacheRequestHandler(socketserver.BaseRequestHandler):
    """Serves one client; each connection works on its own fresh tree."""

    def handle(self) -> None:
        ip, port = self.client_address[:2]
        print(f"Connection from {ip}:{port}")
        sock = self.request
        sock.sendall(BANNER.encode())
        session = CacheSession(Tree())
        while True:
            try:
                data = sock.recv(READ_SIZE)
            except OSError as exc:
                print(f"Client disconnected or read failed: {exc}", file=sys.stderr)
                return
            if not data:
                print("Client disconnected or read failed", file=sys.stderr)
                return
            text = data.decode("utf-8", errors="replace")
            print(f"Received: {text}")
            try:
                reply = session.execute(text)
                ok = True
            except CommandError as exc:
                reply = str(exc)
                ok = False
            if reply:
                sock.sendall(reply.encode())
            print("Instruction executed!\n" if ok else "Execution Failed!\n")


class _CacheServer(socketserver.ThreadingTCPServer):
    daemon_threads = True
    request_queue_size = BACKLOG


def make_server(host: str, port: int) -> socketserver.ThreadingTCPServer:
    """Bind and listen on ``host:port``; raises OSError if that fails."""
    return _CacheServer((host, port), CacheRequestHandler)


def serve(host: str, port: int) -> None:
    """Run the server until interrupted."""
    with make_server(host, port) as server:
        print("socket created successfully.")
        print(f"Server listening on port {host}:{port}")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
        print("Shutting down...")


def _parse_port(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    value = int(match.group(1)) if match else 0
    return value & 0xFFFF


def main(argv: list[str] | None = None) -> int:
    """Start the server on the port given as the first argument."""
    args = sys.argv[1:] if argv is None else argv
    port = _parse_port(args[0] if args else PORT)
    try:
        serve(HOST, port)
    except OSError as exc:
        print(f"Bind failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())