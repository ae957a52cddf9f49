import json
import logging
import asyncio
import sys
from typing import IO, Optional, TextIO

from seo_publisher.config import Config
from seo_publisher.core.context import ToolContext
from seo_publisher.core.dispatcher import Dispatcher, error_response
from seo_publisher.core.errors import InternalError
from seo_publisher.core.wordpress_client import WordPressClient
from seo_publisher.tools.registry import registry
# Import tools to register them
import seo_publisher.tools.seo_tools
import seo_publisher.tools.wordpress_tools

logger = logging.getLogger(__name__)

def configure_logging(level: str = "INFO") -> None:
    # stdout carries protocol traffic only
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

async def serve(dispatcher: Dispatcher, stdin: IO, stdout: TextIO) -> None:
    """Answer each non-blank input line with exactly one output line, in order."""
    # Read raw bytes where available so undecodable input becomes a parse error
    source = getattr(stdin, "buffer", stdin)
    while True:
        line = await asyncio.to_thread(source.readline)
        if not line:
            logger.info("Input closed, shutting down")
            return
        if not line.strip():
            continue

        try:
            response = await dispatcher.handle_line(line)
            output = json.dumps(response.to_wire(), ensure_ascii=False)
        except Exception as e:
            logger.error(f"Unhandled error answering request line: {e}")
            output = json.dumps(error_response(InternalError(str(e))).to_wire(), ensure_ascii=False)
        stdout.write(output + "\n")
        stdout.flush()

async def main(config: Optional[Config] = None) -> None:
    config = config or Config.load()
    logger.info(json.dumps({"event": "config_loaded", "config": config.mask_secrets()}, ensure_ascii=False))

    async with WordPressClient(config.wordpress) as wordpress:
        context = ToolContext.seeded(config.server.random_seed, wordpress=wordpress)
        dispatcher = Dispatcher(registry, context, strict_arguments=config.server.strict_arguments)
        logger.info("SEO Publisher Agent started")
        await serve(dispatcher, sys.stdin, sys.stdout)

def run() -> None:
    config = Config.load()
    configure_logging(config.server.log_level)
    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")

if __name__ == "__main__":
    run()
