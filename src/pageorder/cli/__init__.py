"""
pageorder CLI - Validate print updates against page ordering rules.

Commands:
    pageorder sum     Sum middle pages of correctly-ordered updates
    pageorder check   Report the verdict for every update
"""

from typing import Optional

import click

from pageorder.config import get_config
from pageorder.logger import configure_logging

from .updates import check, sum_cmd


@click.group()
@click.version_option(package_name="pageorder")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Override PAGEORDER_LOG_LEVEL",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"]),
    help="Override PAGEORDER_LOG_FORMAT",
)
def main(log_level: Optional[str], log_format: Optional[str]):
    """pageorder - Check print updates against page ordering rules."""
    config = get_config()
    configure_logging(
        level=log_level or config.log_level,
        fmt=log_format or config.log_format,
    )


main.add_command(sum_cmd, name="sum")
main.add_command(check)
