# cli/commands/serve.py
import click

from core.config import settings


@click.command()
@click.option('--host', default=settings.host, show_default=True, help="Interface to bind")
@click.option('--port', default=settings.port, show_default=True, type=int, help="Port to listen on")
@click.option('--reload', is_flag=True, help="Restart the server when code changes")
def serve(host: str, port: int, reload: bool):
    """Run the catalog web application"""
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["api", "core"] if reload else None,
    )
