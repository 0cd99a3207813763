# cli.py
import click
import logging
from cloud_api.config.settings import get_settings

# Configure logging
logger = logging.getLogger(__name__)


@click.group()
def cli():
    """CLI commands for the Cloud CRUD API"""
    pass


@cli.command()
def show_config():
    """Show current configuration"""
    settings = get_settings()

    click.echo("Current Configuration:")
    click.echo(f"  App Name: {settings.app_name}")
    click.echo(f"  AWS Region: {settings.aws_region}")
    click.echo(f"  AWS Endpoint: {settings.aws_endpoint_url}")
    click.echo(f"  DynamoDB Table: {settings.dynamodb_table_name}")
    click.echo(f"  S3 List Max Keys: {settings.s3_list_max_keys}")
    click.echo(f"  CORS Origins: {', '.join(settings.cors_allow_origins)}")
    click.echo(f"  Log Level: {settings.log_level}")


@cli.command()
@click.option("--host", default="0.0.0.0", show_default=True, help="Interface to bind")
@click.option("--port", default=8000, show_default=True, type=int, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Restart on code changes (development only)")
def run(host, port, reload):
    """Serve the API with uvicorn"""
    import uvicorn

    logger.info(f"Starting API on {host}:{port}")
    uvicorn.run("cloud_api.main:create_app", factory=True, host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()
