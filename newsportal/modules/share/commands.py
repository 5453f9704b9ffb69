import click
from flask import current_app

from . import share_bp


@share_bp.cli.command('regenerate')
@click.option('--prune', is_flag=True, help='Also delete pages for ids no longer in the store.')
def regenerate_command(prune):
    """Rebuild every share page from the news store."""
    portal = current_app.extensions['newsportal']
    news = portal.store.load()
    written = portal.generator.regenerate_all(news)
    click.echo(f"{len(written)} share pages generated in {portal.generator.share_dir}")

    if prune and not portal.generator.prune_stale:
        removed = portal.generator.prune(set(written))
        click.echo(f"{len(removed)} stale share pages removed")
