"""CLI command to start the suncycle HTTP server."""

import logging
import click
import uvicorn

from ..api import SunRestAPI

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to (default: 127.0.0.1)",
)
@click.option(
    "--port",
    default=8080,
    type=int,
    help="Port to bind to (default: 8080)",
)
def main(host, port):
    """Start the suncycle API server.

    Examples:
        # Start with default settings
        suncycle-serve

        # Then query
        curl "http://127.0.0.1:8080/api/sun?latitude=51.5&longitude=-0.13&tz=Europe/London"
    """
    api = SunRestAPI()
    logger.info(f"Starting API server on http://{host}:{port}")
    try:
        uvicorn.run(api.app, host=host, port=port, log_level="info")
    except KeyboardInterrupt:
        click.echo("\nShutting down...")


if __name__ == "__main__":
    main()
