# ABOUTME: CLI package for calibreshelf, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from calibreshelf.cli.commands import comments_cmd, info_cmd, ls_cmd


@click.group()
@click.version_option(package_name="calibreshelf")
def cli() -> None:
    """calibreshelf - browse a Calibre library from the terminal."""


cli.add_command(ls_cmd.ls)
cli.add_command(info_cmd.info)
cli.add_command(comments_cmd.comments)
