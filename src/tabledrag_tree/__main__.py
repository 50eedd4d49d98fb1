# src/tabledrag_tree/__main__.py
import click
import uvicorn

from tabledrag_tree.config import settings
from tabledrag_tree.core.tree_builder import TreeBuilder
from tabledrag_tree.core.tree_store import SqlAlchemyTreeStore
from tabledrag_tree.core.visualizer import render_tree
from tabledrag_tree.db.init_db import init_db, load_items_csv
from tabledrag_tree.db.session import SessionLocal, engine
from tabledrag_tree.utils.logger import log_info


@click.group()
def main():
    """CLI tool for building and reordering item trees."""


@main.command()
@click.option("--host", default="0.0.0.0", show_default=True, help="Interface to bind")
@click.option("--port", type=int, default=8000, show_default=True, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Restart the server when code changes")
def serve(host, port, reload):
    """Run the FastAPI application."""
    log_info(f"🚀 Serving {settings.app_name} on {host}:{port}")
    uvicorn.run("tabledrag_tree.api.app:app", host=host, port=port, reload=reload)


@main.command("init-db")
@click.option("--csv", "csv_path", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Items CSV (defaults to the demo rows)")
def init_db_command(csv_path):
    """Create tables and load items."""
    init_db(engine)
    db = SessionLocal()
    try:
        added = load_items_csv(db, csv_path)
    finally:
        db.close()
    click.echo(f"✅ Added {added} item(s).")


@main.command()
def show():
    """Print the item tree."""
    db = SessionLocal()
    try:
        entries = TreeBuilder(SqlAlchemyTreeStore(db, id_limit=settings.item_id_limit)).build_tree()
    finally:
        db.close()
    if not entries:
        click.echo("Sorry, there are no items!")
        return
    click.echo(render_tree(entries, settings.indent_unit))


if __name__ == "__main__":
    main()
