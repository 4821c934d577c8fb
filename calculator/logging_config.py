import logging


def configure_logging(level: str = "WARNING") -> None:
    """Route log records to stderr; stdout carries results only."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
