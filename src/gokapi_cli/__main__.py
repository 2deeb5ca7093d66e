from gokapi_cli.cli import app

app(prog_name="gokapi-cli")
