"""Package logger shared by the engine and the parser."""
import logging


logger: logging.Logger = logging.getLogger("arithmetic_evaluator")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure a console handler for the package logger.

    The library never calls this itself; applications and the test suite opt in.

    :param str level: Logging level name (e.g. "DEBUG", "INFO")
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(getattr(logging, level.upper()))
