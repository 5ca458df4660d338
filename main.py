"""Run the MCP DocDB server with settings taken from the environment.

Same as ``mcp-docdb server`` without command-line overrides. MCP clients
usually launch this file directly over stdio.
"""

import asyncio
import sys

from mcp_docdb import DocDBServer, Settings
from mcp_docdb.core.exceptions import DocDBError


def main() -> int:
    try:
        asyncio.run(DocDBServer(Settings()).run())
    except KeyboardInterrupt:
        return 0
    except DocDBError as e:
        print(f"mcp-docdb: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
