# MCP server exposing Apillon storage, hosting and NFT operations
# Main module initialization

import sys

__version__ = "1.0.0"


def main() -> None:
    """CLI entry point: run the MCP server over stdio."""
    import asyncio
    import logging

    from .config import get_config
    from .server import configure_logging, serve

    settings = get_config()
    configure_logging(settings.log_level)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
    except Exception:
        logging.getLogger(__name__).exception("Fatal error running server")
        sys.exit(1)
