"""Module entrypoint.

Allows:
    python -m laravel_log_parser
"""

from __future__ import annotations

from laravel_log_parser.server.log_server import main

if __name__ == "__main__":
    main()
