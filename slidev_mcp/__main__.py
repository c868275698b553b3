from slidev_mcp.cli import app

app()
