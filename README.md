# foldercache

foldercache is a small in-memory key-value store that runs as a TCP server.
Keys are kept in folders. A folder is named by a path string such as `/users/`.
A client sends one command at a time, and the server answers in plain text.

## Running the server

```
foldercache            # listens on 127.0.0.1:12000
foldercache 13000      # listens on 127.0.0.1:13000
python -m foldercache.server 13000
```

The server always binds to `127.0.0.1`. The first argument is the port. The
server reads the leading integer of that argument, and a value with no digits
gives port 0. It serves each client in its own thread and runs until it is
interrupted with Ctrl-C. If the address cannot be bound, the command reports
`Bind failed: ...` and exits with status 1.

Any line-oriented client can connect, for example `nc 127.0.0.1 12000`. When a
client connects, the server sends a short greeting that lists the commands.

## Commands

The server splits each request on spaces, carriage returns and newlines. It
reads at most three words from a request: the command, the folder and one
argument.

| Command                    | Effect                                                   |
|----------------------------|----------------------------------------------------------|
| `CREATE /path/`            | create a folder; nothing may follow the path             |
| `INSERT /path/ key=value`  | store a value under a key in an existing folder          |
| `SELECT /path/ key`        | show the value stored under a key                        |
| `PRINT`                    | show every folder with its key/value pairs               |

Rules that apply to these commands:

- `key=value` must be a single word with no spaces. In `key = value`, only `key`
  is read as the argument, and the server rejects it because it contains no `=`.
- The key and the value must both be non-empty. A key cannot be inserted twice
  in the same folder.
- Creating a folder that already exists is an error.
- Keys longer than 127 characters and folder paths longer than 255 characters
  are cut to those lengths.
- The server treats each read of up to 255 bytes from the connection as one
  request.

Each command replies with either a confirmation or an error message. The
server also writes a log of what it received, and whether it succeeded, to
standard output.

`PRINT` lists the folders in the order they were created. Each folder is
indented one step deeper than the folder before it, and each key is shown
beneath its folder as `> { key = 'value' }`.

## Using it from Python

```python
from foldercache.tree import Tree
from foldercache.server import CacheSession, CommandError

session = CacheSession(Tree())
print(session.execute("CREATE /users/"))
print(session.execute("INSERT /users/ alice=admin"))
print(session.execute("SELECT /users/ alice"))
print(session.print_tree())

try:
    session.execute("SELECT /users/ bob")
except CommandError as exc:
    print(exc)          # the error text the server would send
```

- `foldercache.tree` provides `Tree`, which has these methods: `find_node`,
  `find_leaf`, `lookup`, `last_node`, `add_node`, `add_leaf` and `render`.
  Iterating over a `Tree` yields its `Node` objects in order. The module also
  provides `Leaf` and `indent`.
- `foldercache.server` provides:
  - `parse_command(line)`, which splits a request into command, folder and
    argument.
  - `CacheSession`, which has `create`, `insert`, `select`, `print_tree` and
    `execute`.
  - `CommandError`, the exception that is raised when a command is rejected.
  - `CacheRequestHandler`.
  - `make_server(host, port)`, which returns a bound, listening threaded
    server.
  - `serve(host, port)`, which runs a server until it is interrupted.
  - `main(argv=None)`.

## What it does not do

- Every connection gets its own new, empty tree. Data is not shared between
  clients, and it is lost when the client disconnects.
- Nothing is saved to disk.
- There are no commands to update or delete a key, or to remove a folder.
- Folders are a flat chain of path strings. A path is not checked against its
  parent folders.